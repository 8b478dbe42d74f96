import pytest

from pydayz.cfg import (
    CfgLineWarning,
    CfgParser,
    DayZConfigParser,
    LineType,
    find_dayz_cfg
)

from conftest import CFG_LINES, PROFILE_LINES, dump


def test_read_profile(profile_path):
    parser = CfgParser(profile_path)
    entries = parser.read()
    assert len(entries) == len(PROFILE_LINES)
    assert [i.kind for i in entries[:4]] == [
        LineType.NumberInt, LineType.SpecialText,
        LineType.SpecialText, LineType.Misc]
    assert entries[7].indent == 2
    assert entries[7].value == 0.75
    assert parser.encoding == 'utf-8'
    assert parser.newline == '\r\n'


def test_round_trip_untouched(profile_path, dayz_dir):
    before = (dayz_dir / 'Survivor.DayZProfile').read_bytes()
    parser = CfgParser(profile_path)
    parser.write(parser.read())
    assert (dayz_dir / 'Survivor.DayZProfile').read_bytes() == before


def test_round_trip_lf(tmp_path):
    path = tmp_path / 'lf.DayZProfile'
    path.write_bytes(dump(PROFILE_LINES, '\n'))
    parser = CfgParser(str(path))
    parser.write(parser.read())
    assert parser.newline == '\n'
    assert path.read_bytes() == dump(PROFILE_LINES, '\n')


def test_missing_final_newline_added(tmp_path):
    path = tmp_path / 'x.DayZProfile'
    path.write_bytes(b'version=1;\nvsync=1;')
    parser = CfgParser(str(path))
    parser.write(parser.read())
    assert path.read_bytes() == b'version=1;\nvsync=1;\n'


def test_read_missing_file(tmp_path):
    with pytest.raises(OSError):
        CfgParser(str(tmp_path / 'nope.DayZProfile')).read()


def test_demoted_line_warns(tmp_path):
    path = tmp_path / 'x.DayZProfile'
    path.write_bytes(b'refresh=sixty;\r\nrefresh=60;\r\n')
    parser = CfgParser(str(path))
    with pytest.warns(CfgLineWarning):
        entries = parser.read()
    assert entries[0].kind is LineType.Misc
    assert entries[1].value == 60
    parser.write(entries)
    assert path.read_bytes() == b'refresh=sixty;\r\nrefresh=60;\r\n'


def test_ansi_profile(tmp_path):
    path = tmp_path / 'x.DayZProfile'
    raw = b'version=1;\r\nplayerName="Jos\xe9";\r\n'
    path.write_bytes(raw)
    parser = CfgParser(str(path))
    entries = parser.read()
    assert parser.encoding not in ('utf-8', 'utf-8-sig')
    assert entries[1].value.startswith('Jos')
    parser.write(entries)
    assert path.read_bytes() == raw


def test_utf8_bom(tmp_path):
    path = tmp_path / 'x.DayZProfile'
    raw = b'\xef\xbb\xbfversion=1;\r\nplayerName="Zo\xc3\xab";\r\n'
    path.write_bytes(raw)
    parser = CfgParser(str(path))
    entries = parser.read()
    assert parser.encoding == 'utf-8-sig'
    assert entries[0].key == 'version'
    assert entries[1].value == 'Zoë'
    parser.write(entries)
    assert path.read_bytes() == raw


def test_find_dayz_cfg(dayz_dir, profile_path, cfg_path):
    (dayz_dir / 'mydayz.cfg').write_bytes(b'')
    (dayz_dir / 'DayZ.cfg.bak').write_bytes(b'')
    assert find_dayz_cfg(profile_path) == cfg_path


def test_find_dayz_cfg_case_insensitive(tmp_path):
    (tmp_path / 'dayz.CFG').write_bytes(b'')
    assert find_dayz_cfg(str(tmp_path / 'a.DayZProfile')) == str(
        tmp_path / 'dayz.CFG')


def test_find_dayz_cfg_missing(tmp_path):
    (tmp_path / 'a.DayZProfile').write_bytes(b'')
    with pytest.raises(FileNotFoundError, match='No DayZ.cfg found'):
        find_dayz_cfg(str(tmp_path / 'a.DayZProfile'))
    with pytest.raises(FileNotFoundError):
        DayZConfigParser(str(tmp_path / 'a.DayZProfile'))


def test_load_document(profile_path, cfg_path):
    parser = DayZConfigParser(profile_path)
    assert parser.config.filename == cfg_path
    doc = parser.read()
    assert len(doc.profile) == len(PROFILE_LINES)
    assert len(doc.config) == len(CFG_LINES)
    # DayZ.cfg goes first.
    assert doc['vsync'].value is True
    assert doc['playername'].value == 'Survivor'
    assert doc['windowed'].value is False


def test_save_document(dayz_dir, profile_path):
    parser = DayZConfigParser(profile_path)
    doc = parser.read()
    doc['playerName'] = 'Hero'
    doc['windowed'] = True
    parser.write(doc)

    expected = list(PROFILE_LINES)
    expected[1] = '\tplayerName="Hero";'
    assert (dayz_dir / 'Survivor.DayZProfile').read_bytes() == dump(expected)
    expected = list(CFG_LINES)
    expected[2] = 'Windowed=1;'
    assert (dayz_dir / 'DayZ.cfg').read_bytes() == dump(expected)

    again = DayZConfigParser(profile_path).read()
    assert again['playername'].value == 'Hero'
    assert again['playername'].indent == 1
    assert again['windowed'].value is True


def test_update_profile_only(dayz_dir, profile_path):
    parser = DayZConfigParser(profile_path)
    doc = parser.read()
    doc['playerName'] = 'Hero'
    doc['windowed'] = True
    parser.update_profile(doc)
    assert (dayz_dir / 'DayZ.cfg').read_bytes() == dump(CFG_LINES)
    assert b'"Hero"' in (dayz_dir / 'Survivor.DayZProfile').read_bytes()


def test_backup(dayz_dir, profile_path):
    parser = DayZConfigParser(profile_path)
    doc = parser.read()
    doc['playerName'] = 'Hero'
    parser.write(doc, backup=True)
    assert (dayz_dir / 'Survivor.DayZProfile.bak').read_bytes() == dump(
        PROFILE_LINES)
    assert (dayz_dir / 'DayZ.cfg.bak').read_bytes() == dump(CFG_LINES)


def test_backup_custom_suffix(dayz_dir, profile_path, cfg_path):
    parser = DayZConfigParser(profile_path, cfg_path, backup_suffix='.old')
    parser.update_config(parser.read(), backup=True)
    assert (dayz_dir / 'DayZ.cfg.old').exists()
    assert not (dayz_dir / 'Survivor.DayZProfile.old').exists()


def test_backup_nothing_to_copy(tmp_path):
    parser = CfgParser(str(tmp_path / 'new.cfg'))
    assert parser.backup() is None
    parser.write([], backup=True)
    assert (tmp_path / 'new.cfg').read_bytes() == b''
    assert not (tmp_path / 'new.cfg.bak').exists()


def test_write_unencodable_keeps_file(tmp_path):
    path = tmp_path / 'x.DayZProfile'
    raw = b'version=1;\r\nplayerName="Jos\xe9";\r\nvsync=1;\r\n'
    path.write_bytes(raw)
    parser = CfgParser(str(path))
    entries = parser.read()
    entries[1].value = '日本'
    with pytest.raises(UnicodeEncodeError):
        parser.write(entries, backup=True)
    assert path.read_bytes() == raw
    assert not (tmp_path / 'x.DayZProfile.bak').exists()
