import pytest

PROFILE_LINES = [
    'version=1;',
    '\tplayerName="Survivor";',
    'lastMPServerName="DayZ Community Server";',
    'class DifficultyPresets',
    '{',
    '\tclass CustomLevel',
    '\t{',
    '\t\tfovTop=0.75;',
    '\t};',
    '};',
    'gamma=1;',
    'headBob=0.5;',
    'vsync=2;',
    'keyForward[]={17,200};',
    'sceneComplexity=300000;',
    '',
]

CFG_LINES = [
    'language="English";',
    'adapter=-1;',
    'Windowed=0;',
    'refresh=60;',
    'Resolution_W=1920;',
    'Resolution_H=1080;',
    'vsync=1;',
]


def dump(lines: list[str], newline: str = '\r\n') -> bytes:
    return ''.join(i + newline for i in lines).encode('utf-8')


@pytest.fixture
def dayz_dir(tmp_path):
    (tmp_path / 'Survivor.DayZProfile').write_bytes(dump(PROFILE_LINES))
    (tmp_path / 'DayZ.cfg').write_bytes(dump(CFG_LINES))
    return tmp_path


@pytest.fixture
def profile_path(dayz_dir):
    return str(dayz_dir / 'Survivor.DayZProfile')


@pytest.fixture
def cfg_path(dayz_dir):
    return str(dayz_dir / 'DayZ.cfg')
