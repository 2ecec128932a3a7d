from io import StringIO

import pytest

from iniconf import DEFAULT_SECTION, IniFormatError, IniParser, load
from iniconf.model import IniDocument


def test_read_sample(sample_ini):
    doc = IniParser(sample_ini).read()
    assert set(doc) == {DEFAULT_SECTION, 'game01'}
    assert doc[DEFAULT_SECTION].to_dict() == {
        'server_id': '100001',
        'server_name': 'name1',
        'server_desc': 'desc',
    }
    assert doc['game01']['comment'] == 'I am good'
    assert doc['game01']['player_list'] == 'user01;user02;user03'


def test_blank_and_comment_lines_skipped():
    doc = IniParser.readstream(StringIO('\n   \n# a = b\n  # c\nk = v\n'))
    assert doc.to_dict() == {DEFAULT_SECTION: {'k': 'v'}}


def test_no_inline_comments():
    doc = IniParser.readstream(StringIO('k = v # not a comment\n'))
    assert doc.header['k'] == 'v # not a comment'


def test_empty_section_is_kept():
    doc = IniParser.readstream(StringIO('[empty]\n[full]\na = 1\n'))
    assert 'empty' in doc
    assert len(doc['empty']) == 0
    assert DEFAULT_SECTION not in doc


def test_section_name_taken_literally():
    doc = IniParser.readstream(StringIO('[ spaced ]\na = 1\n'))
    assert list(doc) == [' spaced ']


def test_key_and_value_stripped_split_at_first_equal():
    doc = IniParser.readstream(StringIO('  url =  a=b=c  \nempty=\n'))
    assert doc.header['url'] == 'a=b=c'
    assert doc.header['empty'] == ''


@pytest.mark.parametrize('line, expected', [
    ('v = "quoted"', 'quoted'),
    ('v = "half', 'half'),
    ('v = ""', ''),
    ('v = ""double""', '"double"'),
    ('v = "in "middle" kept"', 'in "middle" kept'),
    ('v = trailing"', 'trailing"'),
])
def test_quote_stripping(line, expected):
    doc = IniParser.readstream(StringIO(line))
    assert doc.header['v'] == expected


def test_repeated_key_overwrites():
    doc = IniParser.readstream(StringIO('[s]\na = 1\n[t]\n[s]\na = 2\n'))
    assert doc['s']['a'] == '2'
    assert list(doc) == ['s', 't']


def test_default_header_merges_with_implicit_section():
    doc = IniParser.readstream(StringIO('a = 1\n[default]\nb = 2\n'))
    assert doc.header.to_dict() == {'a': '1', 'b': '2'}


def test_malformed_line_reports_position(write_ini):
    path = write_ini('a = 1\n\n[s]\nfoo\nb = 2\n')
    with pytest.raises(IniFormatError) as e:
        IniParser(path).read()
    assert e.value.lineno == 4
    assert e.value.line == 'foo'
    assert e.value.filename == str(path)
    assert 'foo' in str(e.value)


def test_format_error_is_value_error():
    with pytest.raises(ValueError):
        IniParser.readstream(StringIO('[s]\nnot a pair'))


def test_missing_file(tmp_path):
    with pytest.raises(OSError):
        IniParser(tmp_path / 'nope.ini').read()


def test_bom_skipped(write_ini):
    path = write_ini(b'\xef\xbb\xbfa = 1\n[s]\nb = 2\n')
    doc = IniParser(path).read()
    assert doc.header['a'] == '1'
    assert doc['s']['b'] == '2'


def test_crlf_line_endings(write_ini):
    path = write_ini(b'a = 1\r\n[s]\r\nb = "x"\r\n')
    doc = IniParser(path).read()
    assert doc.to_dict() == {DEFAULT_SECTION: {'a': '1'}, 's': {'b': 'x'}}


def test_explicit_encoding(write_ini):
    path = write_ini('[服务器]\n名称 = 测试\n', encoding='gbk')
    doc = IniParser(path, encoding='gbk').read()
    assert doc['服务器']['名称'] == '测试'


def test_gbk_file_without_encoding(write_ini):
    path = write_ini('[玩家]\n名单 = 甲;乙\n', encoding='gbk')
    doc = IniParser(path).read()
    assert doc.to_dict() == {'玩家': {'名单': '甲;乙'}}


def test_gbk_file_through_config(write_ini):
    conf = load(write_ini('[服务器]\n名称 = 测试\n', encoding='gbk'))
    assert conf.getstring('服务器::名称') == '测试'
    assert conf.getstrings('服务器::名称') == ['测试']


def test_undecodable_bytes_fall_back(write_ini):
    # a trailing GBK lead byte can't be GBK either.
    path = write_ini(b'port = 80\nname = caf\xe9')
    doc = IniParser(path).read()
    assert doc.header['port'] == '80'
    assert doc.header['name'] == 'caf\xe9'


def test_readstream_into_existing_document():
    doc = IniDocument()
    IniParser.readstream(StringIO('a = 1\nb = 1\n'), doc)
    IniParser.readstream(StringIO('b = 2\n'), doc)
    assert doc.header.to_dict() == {'a': '1', 'b': '2'}


def test_parsing_twice_is_identical(sample_ini):
    assert IniParser(sample_ini).read().to_dict() == \
        IniParser(sample_ini).read().to_dict()
