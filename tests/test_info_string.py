from utilkit.info_string import InfoString


def test_parse_and_get():
    info = InfoString("\\key\\value\\k2\\v2")
    assert info.get("key") == "value"
    assert info.get("k2") == "v2"


def test_missing_key_is_empty():
    assert InfoString("\\a\\b").get("missing") == ""


def test_without_leading_backslash():
    assert InfoString("a\\b").get("a") == "b"


def test_trailing_key_without_value_is_ignored():
    info = InfoString("\\a\\b\\c")
    assert info.get("c") == ""
    assert "c" not in info
    assert len(info) == 1


def test_build_single_pair():
    info = InfoString()
    info.set("a", "b")
    assert info.build() == "\\a\\b"


def test_set_overwrites():
    info = InfoString("\\name\\old")
    info.set("name", "new")
    assert info.get("name") == "new"
    assert len(info) == 1


def test_empty_build():
    assert InfoString("").build() == ""