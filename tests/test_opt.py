from enum import Enum

import pytest

from cuteopt import opt


class Key(Enum):
    ON = 0
    OFF = 1


# --- Builders --------------------------------------------------------------- #


def test_switch():
    keeper = opt.switch("--on", Key.ON)
    assert keeper.spelling == "--on"
    assert keeper.kind == opt.Kind.SWITCH
    assert keeper.key is Key.ON
    assert not keeper.consumes()


def test_option():
    keeper = opt.option("--on", Key.ON)
    assert keeper.kind == opt.Kind.VALUE
    assert keeper.consumes()


def test_keeper_is_frozen():
    keeper = opt.switch("--on", Key.ON)
    with pytest.raises(AttributeError):
        keeper.spelling = "--off"  # type: ignore


def test_unhashable_key():
    with pytest.raises(TypeError):
        opt.switch("--on", ["not", "hashable"])


def test_nested_unhashable_key():
    with pytest.raises(TypeError):
        opt.option("--on", ("a", []))


# --- Matching --------------------------------------------------------------- #


def test_split_token():
    assert opt.splitToken("--foo") == ("--foo", None)
    assert opt.splitToken("--foo=bar") == ("--foo", "bar")
    assert opt.splitToken("--foo=") == ("--foo", "")
    assert opt.splitToken("--foo=a=b") == ("--foo", "a=b")


def test_match():
    keeper = opt.option("test", Key.ON)
    assert keeper.match("test") == opt.Match(True, None)
    assert keeper.match("test=value") == opt.Match(True, "value")
    assert keeper.match("test=") == opt.Match(True, "")
    assert keeper.match("testing") == opt.NO_MATCH
    assert keeper.match("other") == opt.NO_MATCH


# --- Registry --------------------------------------------------------------- #


def test_registry_find():
    reg = opt.Registry()
    reg.register(opt.switch("--on", Key.ON))
    reg.register(opt.option("--off", Key.OFF))

    found = reg.find("--off")
    assert found is not None
    assert found.key is Key.OFF
    assert reg.find("--unknown") is None
    assert reg.find("--on=1") is None
    assert len(reg) == 2
    assert "--on" in reg


def test_registry_last_write_wins():
    reg = opt.Registry()
    reg.register(opt.switch("--flag", Key.ON))
    reg.register(opt.switch("--flag", Key.OFF))

    found = reg.find("--flag")
    assert found is not None
    assert found.key is Key.OFF
    assert len(reg) == 1


def test_registry_keeps_order():
    reg = opt.Registry()
    reg.register(opt.switch("--b", Key.ON))
    reg.register(opt.switch("--a", Key.OFF))
    assert [k.spelling for k in reg] == ["--b", "--a"]


def test_registry_lookup_by_key():
    reg = opt.Registry()
    reg.register(opt.switch("--on", Key.ON))
    reg.register(opt.switch("--enable", Key.ON))

    found = reg.lookup(Key.ON)
    assert found is not None
    assert found.spelling == "--enable"
    assert reg.has(Key.ON)
    assert not reg.has(Key.OFF)


def test_match_after_find():
    reg = opt.Registry()
    reg.register(opt.option("--name", Key.ON))

    name, _ = opt.splitToken("--name=value")
    keeper = reg.find(name)
    assert keeper is not None
    assert keeper.match("--name=value").inline == "value"
