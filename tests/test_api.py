#!/usr/bin/env python3
"""
Convenience API and configuration.
"""

import pytest

from bfi import MemoryChannel, RunOptions, UnknownInstruction, run_file, run_string


def test_run_string_collects_output_and_state():
    result = run_string(",+.>++", input=b"a")
    assert result.output == b"b"
    assert result.cursor == 1
    assert result.tape[0] == ord("b")
    assert result.tape[1] == 2
    assert result.steps == 6


def test_run_string_honours_options():
    result = run_string("<+", options=RunOptions(tape_size=8))
    assert result.cursor == 7
    assert len(result.tape) == 8

    with pytest.raises(UnknownInstruction):
        run_string("+ +", options=RunOptions(strict=True))


def test_options_validate_tape_size():
    with pytest.raises(ValueError):
        RunOptions(tape_size=0)


def test_options_from_env():
    opts = RunOptions.from_env({"BFI_TAPE_SIZE": "512", "BFI_STRICT": "yes"})
    assert opts == RunOptions(tape_size=512, strict=True)
    assert RunOptions.from_env({}) == RunOptions()
    assert RunOptions.from_env({"BFI_STRICT": "0"}).strict is False


def test_options_from_env_rejects_garbage():
    with pytest.raises(ValueError):
        RunOptions.from_env({"BFI_TAPE_SIZE": "lots"})


def test_run_file(tmp_path):
    path = tmp_path / "prog.b"
    path.write_text("+++[>++<-]>.", encoding="utf-8")
    sink = MemoryChannel()
    itp = run_file(path, source=MemoryChannel(), sink=sink)
    assert sink.output == b"\x06"
    assert itp.tape[1] == 6


def test_results_compare_by_identity():
    first = run_string("+")
    second = run_string("+")
    assert first != second
    assert first == first
    assert (first.tape == second.tape).all()
