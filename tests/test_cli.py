"""Tests for the python -m ipsec_algorithm CLI."""

from ipsec_algorithm import mandatory_set
from ipsec_algorithm.__main__ import main


class TestList:
    """list command."""

    def test_lists_every_algorithm(self, capsys):
        """Every recognized algorithm appears with its constraints."""
        assert main(["list"]) == 0
        out = capsys.readouterr().out
        assert "hmac(sha512)" in out
        assert "256-512" in out
        assert "64, 96, 128" in out
        assert "rfc7539esp(chacha20,poly1305)" in out


class TestSupported:
    """supported command."""

    def test_api_level(self, capsys):
        """Only mandatory algorithms without an allow-list."""
        assert main(["supported", "--api-level", "30", "--optional"]) == 0
        lines = capsys.readouterr().out.split()
        assert lines == sorted(algo.value for algo in mandatory_set(30))

    def test_optional(self, capsys):
        """Allow-listed algorithms are added."""
        assert main(["supported", "--api-level", "30", "--optional", "cmac(aes)", "rot13"]) == 0
        lines = capsys.readouterr().out.split()
        assert "cmac(aes)" in lines
        assert "rot13" not in lines

    def test_settings_defaults(self, capsys, monkeypatch):
        """Level and allow-list default to settings."""
        monkeypatch.setenv("IPSEC_VENDOR_API_LEVEL", "30")
        monkeypatch.setenv("IPSEC_OPTIONAL_ALGORITHMS", '["xcbc(aes)"]')
        assert main(["supported"]) == 0
        lines = capsys.readouterr().out.split()
        assert "xcbc(aes)" in lines
        assert "cmac(aes)" not in lines


class TestCheck:
    """check command."""

    def test_valid(self, capsys):
        """Valid parameters exit 0."""
        assert main(["check", "hmac(sha512)", "--key-bits", "512", "--trunc-bits", "256"]) == 0
        assert "Valid" in capsys.readouterr().out

    def test_invalid_trunc(self, capsys):
        """Invalid truncation length exits 1 with the reason."""
        assert main(["check", "hmac(sha512)", "--key-bits", "512", "--trunc-bits", "255"]) == 1
        assert "truncation length" in capsys.readouterr().out

    def test_invalid_name(self, capsys):
        """Unknown algorithm exits 1."""
        assert main(["check", "rot13", "--key-bits", "128"]) == 1
        assert "rot13" in capsys.readouterr().out

    def test_key_bits_not_byte_aligned(self, capsys):
        """Key length must be whole bytes."""
        assert main(["check", "cbc(aes)", "--key-bits", "12"]) == 1


class TestDispatch:
    """Command dispatch."""

    def test_no_command(self, capsys):
        """No command prints help."""
        assert main([]) == 0
        assert "Usage" in capsys.readouterr().out

    def test_unknown_command(self, capsys):
        """Unknown command exits 1."""
        assert main(["bogus"]) == 1
        assert "Unknown command: bogus" in capsys.readouterr().out
