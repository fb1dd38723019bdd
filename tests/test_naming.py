import os
import pytest
from prc_keygen.errors import InvalidArgument
from prc_keygen.naming import OutputPattern, check_extension, resolve


def test_no_placeholder_level_one_has_no_suffix():
    r = resolve("priv.cxx", 1)
    assert r.path == "priv.cxx"
    assert not r.explicit_suffix
    assert r.progname == "priv"


def test_no_placeholder_other_levels_get_number():
    assert resolve("priv.cxx", 1).path == "priv.cxx"
    r = resolve("priv.cxx", 2)
    assert r.path == "priv2.cxx"
    assert r.explicit_suffix
    assert r.progname == "priv2"


def test_placeholder_always_numbered():
    r = resolve("priv#.cxx", 1)
    assert r.path == "priv1.cxx"
    assert r.explicit_suffix


def test_placeholder_in_middle():
    assert resolve("sign_#_tool.cxx", 12).path == "sign_12_tool.cxx"


def test_directory_is_kept():
    path = os.path.join("out", "keys", "priv#.cxx")
    assert resolve(path, 3).path == os.path.join("out", "keys", "priv3.cxx")


def test_pattern_fields():
    p = OutputPattern.from_path("a#b.cxx")
    assert (p.prefix, p.suffix, p.has_placeholder) == ("a", "b.cxx", True)


def test_extension_check():
    check_extension("pub.cxx", "Public key")
    with pytest.raises(InvalidArgument, match=r"should have a \.cxx extension"):
        check_extension("pub.cpp", "Public key")
    with pytest.raises(InvalidArgument):
        check_extension("pub", "Public key")
