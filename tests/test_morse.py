import pytest

import morse

SOS = '· · ·   ― ― ―   · · ·'


def run(capsys, *argv):
    with pytest.raises(SystemExit) as excinfo:
        morse.main(list(argv))
    out, err = capsys.readouterr()
    return excinfo.value.code, out, err


def test_encode_message(capsys):
    code, out, err = run(capsys, 'encode', '--message', 'SOS')
    assert code == morse.EX_SUCCESS
    assert out == SOS + '\n'
    assert err == ''


def test_decode_message(capsys):
    code, out, _ = run(capsys, 'decode', '-m', SOS)
    assert code == 0
    assert out == 'sos\n'


def test_input_and_output_are_trimmed(capsys):
    code, out, _ = run(capsys, 'encode', '-m', '  Hello There \n')
    assert code == 0
    assert out.rstrip('\n') == out.strip()
    code, out, _ = run(capsys, 'decode', '-m', out)
    assert out == 'hello there\n'


def test_encode_source_file(capsys, tmp_path):
    source = tmp_path / 'message.txt'
    source.write_text('hello there friend\n', encoding='utf-8')
    code, out, _ = run(capsys, 'encode', '--source-file', str(source))
    assert code == 0
    assert out.endswith('\n')
    code, out, _ = run(capsys, 'decode', '-m', out)
    assert out == 'hello there friend\n'


def test_output_file_is_written_without_newline(capsys, tmp_path):
    target = tmp_path / 'out.txt'
    target.write_text('previous contents', encoding='utf-8')
    code, out, _ = run(capsys, 'encode', '-m', 'sos', '-o', str(target))
    assert code == 0
    assert out == ''
    assert target.read_text(encoding='utf-8') == SOS


def test_decode_from_file_to_file(capsys, tmp_path):
    source = tmp_path / 'in.txt'
    target = tmp_path / 'out.txt'
    source.write_text(SOS, encoding='utf-8')
    code, _, _ = run(capsys, 'decode', '-c', str(source), '--output', str(target))
    assert code == 0
    assert target.read_text(encoding='utf-8') == 'sos'


@pytest.mark.parametrize('argv', [
    ('encode', '-m', 'hello!'),
    ('encode', '-m', 'héllo'),
    ('decode', '-m', '... --- ...'),
    ('decode', '-m', 'sos'),
])
def test_unallowed_characters_are_rejected(capsys, argv):
    code, out, err = run(capsys, *argv)
    assert code == morse.EX_FAILURE
    assert out == ''
    assert 'unallowed characters' in err


def test_unknown_sequence_is_reported(capsys):
    code, out, err = run(capsys, 'decode', '-m', '― ― ― ―')
    assert code == 1
    assert out == ''
    assert 'not a valid morse code sequence' in err


def test_malformed_gap_is_reported(capsys):
    code, _, err = run(capsys, 'decode', '-m', '·  ―')
    assert code == 1
    assert 'not a valid morse code symbol' in err


def test_unknown_character_past_validation_is_reported(capsys):
    # \s lets a tab through validation; the translator refuses it.
    code, _, err = run(capsys, 'encode', '-m', 'a\tb')
    assert code == 1
    assert 'cannot be translated' in err


def test_missing_source_file(capsys, tmp_path):
    code, _, err = run(capsys, 'encode', '-c', str(tmp_path / 'nope.txt'))
    assert code == 1
    assert 'cannot open' in err


def test_source_file_is_directory(capsys, tmp_path):
    code, _, err = run(capsys, 'encode', '-c', str(tmp_path))
    assert code == 1
    assert 'cannot open' in err


def test_source_file_not_utf8(capsys, tmp_path):
    source = tmp_path / 'binary.bin'
    source.write_bytes(b'\xff\xfe\x00abc')
    code, _, err = run(capsys, 'encode', '-c', str(source))
    assert code == 1
    assert 'not valid UTF-8' in err


def test_message_and_source_file_are_exclusive(capsys, tmp_path):
    code, _, err = run(capsys, 'encode', '-m', 'a', '-c', str(tmp_path / 'x'))
    assert code == 2
    assert 'not allowed with' in err


def test_input_is_required(capsys):
    code, _, _ = run(capsys, 'encode')
    assert code == 2


def test_unknown_mode(capsys):
    code, _, _ = run(capsys, 'translate', '-m', 'a')
    assert code == 2


def test_list_prints_table(capsys):
    code, out, _ = run(capsys, '--list')
    assert code == 0
    lines = out.splitlines()
    assert len(lines) == 37
    assert 'a: · ―' in lines


def test_version(capsys):
    code, out, _ = run(capsys, '--version')
    assert code == 0
    assert morse.__version__ in out
