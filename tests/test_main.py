from typer.testing import CliRunner

from main import app

runner = CliRunner()

ABC = ["-c", "a=0", "-c", "b=10", "-c", "c=11"]


class TestMain:
    def test_encode(self) -> None:
        result = runner.invoke(app, ["encode", "abc", *ABC])
        assert result.exit_code == 0
        assert result.stdout.strip() == "01011"

    def test_encode_skips_unknown(self) -> None:
        result = runner.invoke(app, ["encode", "axc", *ABC])
        assert result.exit_code == 0
        assert result.stdout.strip() == "011"

    def test_encode_strict(self) -> None:
        result = runner.invoke(app, ["encode", "axc", "--strict", *ABC])
        assert result.exit_code == 1
        assert "Encoding failed" in result.stdout

    def test_decode(self) -> None:
        result = runner.invoke(app, ["decode", "0 10 11", *ABC])
        assert result.exit_code == 0
        assert result.stdout.strip() == "abc"

    def test_decode_truncated(self) -> None:
        result = runner.invoke(app, ["decode", "01", *ABC])
        assert result.exit_code == 1
        assert "Decoding failed" in result.stdout

    def test_decode_invalid_tree(self) -> None:
        result = runner.invoke(app, ["decode", "0", "-c", "a=0", "-c", "b=01"])
        assert result.exit_code == 1
        assert "Invalid code tree" in result.stdout

    def test_decode_bad_bits(self) -> None:
        result = runner.invoke(app, ["decode", "012", *ABC])
        assert result.exit_code == 2

    def test_validate(self) -> None:
        assert runner.invoke(app, ["validate", *ABC]).exit_code == 0
        result = runner.invoke(app, ["validate", "-c", "a=0", "-c", "b=10"])
        assert result.exit_code == 1
        assert "invalid" in result.stdout

    def test_equals_sign_symbol(self) -> None:
        result = runner.invoke(app, ["encode", "=a", "-c", "==1", "-c", "a=0"])
        assert result.exit_code == 0
        assert result.stdout.strip() == "10"

    def test_bad_code_option(self) -> None:
        result = runner.invoke(app, ["encode", "a", "-c", "ab=0"])
        assert result.exit_code == 2
        result = runner.invoke(app, ["encode", "a", "-c", "a=2"])
        assert result.exit_code == 2

    def test_show(self) -> None:
        result = runner.invoke(app, ["show", *ABC])
        assert result.exit_code == 0
        assert "'a'" in result.stdout
        assert "'c'" in result.stdout

    def test_encode_hex(self) -> None:
        result = runner.invoke(app, ["encode", "abc", "--hex", *ABC])
        assert result.exit_code == 0
        assert result.stdout.strip() == "58 5"

    def test_decode_hex(self) -> None:
        result = runner.invoke(app, ["decode", "58", "--hex", "--length", "5", *ABC])
        assert result.exit_code == 0
        assert result.stdout.strip() == "abc"

    def test_decode_hex_keeps_padding_without_length(self) -> None:
        result = runner.invoke(app, ["decode", "58", "--hex", *ABC])
        assert result.exit_code == 0
        assert result.stdout.strip() == "abcaaa"

    def test_decode_bad_hex(self) -> None:
        result = runner.invoke(app, ["decode", "5g", "--hex", *ABC])
        assert result.exit_code == 2
