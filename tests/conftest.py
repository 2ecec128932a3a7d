import pytest

SAMPLE_INI = '''
#first ini test config
server_id = 100001
server_name = name1
server_desc = desc
[game01]
player_list = user01;user02;user03
score = 1.2
gcm = true
comment = "I am good"
'''


@pytest.fixture
def write_ini(tmp_path):
    def _write(content, name='test.ini', encoding='utf-8'):
        path = tmp_path / name
        if isinstance(content, bytes):
            path.write_bytes(content)
        else:
            path.write_bytes(content.encode(encoding))
        return path
    return _write


@pytest.fixture
def sample_ini(write_ini):
    return write_ini(SAMPLE_INI)
