"""
Tests for assembly_encoder.cli
"""

import pytest

from assembly_encoder.cli import main

from conftest import write_tree


def run_cli(argv):
    with pytest.raises(SystemExit) as excinfo:
        main(argv)
    return excinfo.value.code


def test_no_command_prints_help(capsys):
    assert run_cli([]) == 1
    assert 'usage' in capsys.readouterr().out


def test_check_pass(input_dir, capsys):
    assert run_cli(['check', '--input', str(input_dir)]) == 0
    assert 'Found data files!' in capsys.readouterr().out


def test_check_fail(tmp_path, capsys):
    root = write_tree(tmp_path / 'input', {'dataset_catalog.json': ''})

    assert run_cli(['check', '--input', str(root)]) == 1
    out = capsys.readouterr().out
    assert 'No data files found!' in out
    assert 'MISSING' in out


def test_locate(input_dir, assembly_dir, capsys):
    assert run_cli(['locate', '--input', str(input_dir)]) == 0
    assert capsys.readouterr().out.strip() == str(assembly_dir)


def test_locate_not_found(tmp_path, capsys):
    root = write_tree(tmp_path / 'input', {'a.txt': ''})

    assert run_cli(['locate', '--input', str(root)]) == 1
    assert 'No assembly directory' in capsys.readouterr().err


def test_list(input_dir, capsys):
    assert run_cli(['list', '--input', str(input_dir)]) == 0
    assert capsys.readouterr().out.split() == ['chr1.fna', 'chrX.fna']


def test_status(input_dir, capsys):
    assert run_cli(['status', '--input', str(input_dir)]) == 0
    out = capsys.readouterr().out
    assert 'Metadata files found:   4/4' in out
    assert 'GCA_000001' in out


def test_encode(input_dir, capsys):
    assert run_cli(['encode', '--input', str(input_dir), '--show', '2', '--hex']) == 0
    out = capsys.readouterr().out
    assert '[1/2] Reading file: chr1.fna' in out
    assert 'Bases encoded: 8' in out
    assert '[(1, 1), (1, 0)]' in out
    # ACGT TTAA -> 11100100 00001111
    assert 'e40f' in out


def test_encode_strict_failure(tmp_path, capsys):
    root = write_tree(tmp_path / 'input', {'GCA_1/chr1.fna': 'A'})

    assert run_cli(['encode', '--input', str(root), '--strict']) == 1
    assert 'ERROR: Missing metadata files' in capsys.readouterr().err


def test_encode_missing_input(tmp_path, capsys):
    assert run_cli(['encode', '--input', str(tmp_path / 'input')]) == 1
    assert 'ERROR' in capsys.readouterr().err


def test_encode_rejects_zero_chunk_size(input_dir):
    assert run_cli(['encode', '--input', str(input_dir), '--chunk-size', '0']) == 2


def test_encode_rejects_negative_show(input_dir):
    assert run_cli(['encode', '--input', str(input_dir), '--show', '-3']) == 2

