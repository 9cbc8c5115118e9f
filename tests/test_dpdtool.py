"""Command line conversion utility."""

import pytest

from dpdtool import Converter, main, parse_args


def run(capsys, *argv):
    status = main(["-q"] + list(argv))
    return status, capsys.readouterr().out


class TestModes:

    def test_encode_is_default(self, capsys):
        status, out = run(capsys, "1")
        assert status == 0
        assert out.split() == ["22500001", "00100010010100000000000000000001",
                               "0000001e0"]

    def test_decode_hex(self, capsys):
        status, out = run(capsys, "-m", "decode", "22228E56")
        assert status == 0
        assert out.split()[-1] == "0123456e-3"

    @pytest.mark.parametrize("image,text", [
        ("00000001", "0000001e-101"),
        ("10000000", "4000000e-101"),
    ])
    def test_decode_hex_of_zeros_and_ones(self, capsys, image, text):
        status, out = run(capsys, "-m", "decode", image, "22500001")
        assert status == 0
        lines = out.splitlines()
        assert lines[0].split()[0] == image
        assert lines[0].split()[-1] == text
        assert lines[1].split()[-1] == "0000001e0"

    def test_decode_bits(self, capsys):
        status, out = run(capsys, "-m", "decode",
                          "10100010010100000000000000000001")
        assert status == 0
        assert out.split()[0] == "A2500001"
        assert out.split()[-1] == "-0000001e0"

    def test_declet(self, capsys):
        status, out = run(capsys, "-m", "declet", "123")
        assert status == 0
        assert "BCD: 000100100011" in out
        assert "DPD: 0010100011" in out
        assert "(0A3)" in out

    def test_bcd(self, capsys):
        status, out = run(capsys, "-m", "bcd", "100110011001")
        assert status == 0
        assert "DPD: 0011111111" in out
        assert "decimal: 999" in out

    def test_dpd(self, capsys):
        status, out = run(capsys, "-m", "dpd", "1111111111", "0011111111")
        lines = out.splitlines()
        assert status == 0
        assert "decimal: 999" in lines[0]
        assert lines[0].endswith("non-canonical")
        assert lines[1].endswith(" canonical")

    def test_quiz_seeded(self, capsys):
        first = run(capsys, "-m", "quiz", "-n", "3", "--seed", "99")
        second = run(capsys, "-m", "quiz", "-n", "3", "--seed", "99")
        assert first == second
        assert first[1].splitlines()[0].startswith("[01] ")
        assert len(first[1].splitlines()) == 3


class TestErrors:

    def test_error_continues(self, capsys):
        status, out = run(capsys, "-m", "declet", "1000", "5")
        lines = out.splitlines()
        assert status == 1
        assert lines[0].startswith("ERROR: ")
        assert lines[1].startswith("005")

    def test_not_an_integer(self, capsys):
        status, out = run(capsys, "-m", "declet", "abc")
        assert status == 1
        assert "not a decimal integer" in out

    def test_decode_length(self, capsys):
        status, out = run(capsys, "-m", "decode", "0101")
        assert status == 1
        assert "must contain 32 bits" in out

    def test_encode_range(self, capsys):
        status, out = run(capsys, "1e200")
        assert status == 1
        assert "biased exponent out of range" in out

    def test_quiz_negative_count(self, capsys):
        status, out = run(capsys, "-m", "quiz", "-n", "-1")
        assert status == 1
        assert out.startswith("ERROR: ")


def test_copyright(capsys):
    assert main(["1"]) == 0
    assert capsys.readouterr().out.startswith("dpdtool.py Copyright")


def test_prompt(monkeypatch, capsys):
    answers = iter(["-1.5", "", "bad", "quit"])
    monkeypatch.setattr("builtins.input", lambda prompt: next(answers))
    status = main(["-q", "--prompt"])
    lines = capsys.readouterr().out.splitlines()
    assert status == 1
    assert lines[0].endswith("-0000015e-1")
    assert lines[1].startswith("ERROR: ")


def test_prompt_end_of_input(monkeypatch, capsys):
    def eof(prompt):
        raise EOFError
    monkeypatch.setattr("builtins.input", eof)
    assert main(["-q", "--prompt"]) == 0


def test_debug_option(caplog, capsys):
    caplog.set_level("DEBUG")
    assert main(["-q", "--debug", "1"]) == 0
    assert any(r.name == "dpdtool" for r in caplog.records)


def test_no_debug_records_without_option(caplog, capsys):
    caplog.set_level("DEBUG")
    assert main(["-q", "1"]) == 0
    assert not any(r.name == "dpdtool" for r in caplog.records)


def test_converter_output_stream(capsys):
    class Stream:
        def __init__(self):
            self.text = []

        def write(self, s):
            self.text.append(s)

        def flush(self):
            pass

    stream = Stream()
    Converter(parse_args(["-m", "declet", "7"]), out=stream).run()
    assert "".join(stream.text).startswith("007")
    assert capsys.readouterr().out == ""
