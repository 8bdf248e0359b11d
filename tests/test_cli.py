import struct

from codarts.cli import main
from codarts.timeseries import dumps, unpack


def test_tsdump(tmp_path, ts_bytes):
    infile = tmp_path / 'file.ts'
    outfile = tmp_path / 'file.txt'
    infile.write_bytes(ts_bytes)

    assert main(['tsdump', str(infile), str(outfile)]) == 0
    assert outfile.read_text(encoding='latin-1') == dumps(unpack(ts_bytes))


def test_tsdump_header_only(tmp_path, ts_bytes):
    infile = tmp_path / 'file.ts'
    outfile = tmp_path / 'file.txt'
    infile.write_bytes(ts_bytes)

    assert main(['/usr/local/bin/tsdump', '-h', str(infile), str(outfile)]) == 0
    assert outfile.read_text(encoding='latin-1') == dumps(unpack(ts_bytes), header_only=True)


def test_tsgen(tmp_path, ts_text, ts_bytes):
    infile = tmp_path / 'file.txt'
    outfile = tmp_path / 'file.ts'
    infile.write_text(ts_text, encoding='latin-1')

    assert main(['tsgen.py', str(infile), str(outfile)]) == 0
    assert outfile.read_bytes() == ts_bytes


def test_mode_as_argument(tmp_path, ts_text, ts_bytes):
    infile = tmp_path / 'file.txt'
    outfile = tmp_path / 'file.ts'
    infile.write_text(ts_text, encoding='latin-1')

    assert main(['codarts', 'tsgen', str(infile), str(outfile)]) == 0
    assert outfile.read_bytes() == ts_bytes


def test_usage(capsys):
    assert main(['codarts']) == 1
    assert main(['codarts', 'kebab']) == 1
    assert main(['tsdump', 'only-one']) == 1
    assert main(['tsgen', '-h', 'a', 'b']) == 1

    assert 'usage: tsdump [-h] <ts file> <text file>' in capsys.readouterr().out


def test_no_output_on_failure(tmp_path, capsys, ts_bytes):
    infile = tmp_path / 'file.ts'
    outfile = tmp_path / 'file.txt'
    infile.write_bytes(b'kbab' + ts_bytes[4:])

    assert main(['tsdump', str(infile), str(outfile)]) == 1
    assert not outfile.exists()
    assert "unknown block 'kbab'" in capsys.readouterr().err


def test_missing_input(tmp_path, capsys):
    outfile = tmp_path / 'file.ts'

    assert main(['tsgen', str(tmp_path / 'missing.txt'), str(outfile)]) == 1
    assert not outfile.exists()
    assert capsys.readouterr().err.startswith('tsgen: ')


def test_tsgen_bad_text(tmp_path, capsys):
    infile = tmp_path / 'file.txt'
    outfile = tmp_path / 'file.ts'
    infile.write_text('AQLV\nHEAD\nBODY\n\nalvl\ni:1.0\n\nEND\n', encoding='latin-1')

    assert main(['tsgen', str(infile), str(outfile)]) == 1
    assert not outfile.exists()


def test_nested_containers(tmp_path, capsys):
    infile = tmp_path / 'file.ts'
    outfile = tmp_path / 'file.txt'
    depth = 2000
    infile.write_bytes(b''.join(
        struct.pack('>4sI', b'AQLV', 8 * (depth - 1 - n)) for n in range(depth)))

    assert main(['tsdump', str(infile), str(outfile)]) == 1
    assert not outfile.exists()
    assert "container 'AQLV' cannot be inside 'AQLV'" in capsys.readouterr().err
