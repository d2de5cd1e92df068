import io

import pytest

from colorize.formatter import TABLE_ERROR, Colorizer, colorizer
from colorize.theme.codes import RESET, resolve
from colorize.theme.engine import CATEGORIES, ByName, Inline, Theme

CUSTOM = {c: {"color": "blue", "emphasis": "underscore"} for c in CATEGORIES}


def written(sink):
    return sink.getvalue().splitlines()


def test_format_order_and_reset(out):
    styled = out.format("hi", "red", "bgWhite", "bright")
    assert styled == "\x1b[1m\x1b[47m\x1b[31mhi\x1b[0m"


def test_format_color_only(out):
    styled = out.format("plain text", "green")
    assert styled.endswith(RESET)
    assert "plain text" in styled
    assert styled.startswith(resolve("green"))


def test_format_unknown_codes_are_ignored(out):
    assert out.format("x", "purple", "bgNope", "sparkle") == "x" + RESET


@pytest.mark.parametrize("args", [
    ("red",),
    ("red", "bgBlue", "bright"),
    ("nope", None, "dim"),
    (None, None, None),
])
def test_disabled_returns_text_unchanged(out, args):
    out.set_enabled(False)
    assert out.format("some text", *args) == "some text"


def test_disabled_semantic_output_is_plain(out, sink):
    out.set_theme("vibrant").set_enabled(False)
    out.success("a").error("b").warning("c").info("d").debug("e", "bright")
    assert out.format_prompt("q?") == "q?"
    assert written(sink) == ["a", "b", "c", "d", "e"]


def test_format_prompt_uses_prompt_style(out):
    out.set_theme("dark")
    assert out.format_prompt("Name? ") == "\x1b[4m\x1b[37mName? \x1b[0m"


def test_vibrant_success_line(out, sink):
    out.set_theme("vibrant").success("OK")
    assert written(sink) == ["\x1b[1m\x1b[40m\x1b[32mOK\x1b[0m"]


def test_missing_background_is_omitted(out, sink):
    out.info("hello")
    assert written(sink) == ["\x1b[36mhello\x1b[0m"]


def test_emphasis_override_replaces_theme_emphasis(out, sink):
    out.set_theme("dark").error("boom", "underscore")
    assert written(sink) == ["\x1b[4m\x1b[31mboom\x1b[0m"]


def test_chaining_preserves_order(out, sink):
    result = out.info("a").success("b")
    assert result is out
    lines = written(sink)
    assert len(lines) == 2
    assert "a" in lines[0] and "b" in lines[1]


def test_setters_return_self(out):
    assert out.set_theme("dark") is out
    assert out.set_enabled(True) is out
    assert out.create_theme("x", CUSTOM) is out
    assert out.use(ByName("light")) is out


def test_unknown_theme_falls_back_to_default(out, registry):
    out.set_theme("does-not-exist")
    assert out.theme is registry.get("default")


def test_custom_theme_is_not_registered(out, registry):
    out.set_theme("custom", CUSTOM)
    assert out.theme.info.color == "blue"
    assert "custom" not in registry


def test_custom_without_theme_falls_back(out, registry):
    out.set_theme("custom")
    assert out.theme is registry.get("default")


def test_theme_object_used_directly(out):
    theme = Theme.light()
    out.set_theme(theme)
    assert out.theme is theme


def test_mapping_theme_used_directly(out, sink):
    out.set_theme(CUSTOM).warning("careful")
    assert written(sink) == ["\x1b[4m\x1b[34mcareful\x1b[0m"]


@pytest.mark.parametrize("bad", [{"success": {}}, 12, None, ["dark"]])
def test_malformed_theme_falls_back_to_default(out, registry, bad):
    out.set_theme("dark")
    out.set_theme(bad)
    assert out.theme is registry.get("default")


def test_create_theme_then_select(out, sink):
    out.set_theme("vibrant")
    out.create_theme("x", CUSTOM).set_theme("x").success("done")
    assert written(sink) == ["\x1b[4m\x1b[34mdone\x1b[0m"]


def test_create_malformed_theme_keeps_registry(out, registry):
    out.create_theme("x", "not a theme").set_theme("x")
    assert out.theme is registry.get("default")


def test_inline_ref(out):
    theme = Theme.minimal()
    out.use(Inline(theme))
    assert out.theme is theme


def test_instances_are_independent(registry):
    a = Colorizer("dark", registry=registry, stream=io.StringIO())
    b = Colorizer("light", enabled=False, registry=registry, stream=io.StringIO())
    a.set_theme("vibrant")
    assert b.theme.name == "light"
    assert a.enabled and not b.enabled


def test_constructor_custom_theme(registry):
    c = Colorizer("custom", custom_theme=CUSTOM, registry=registry)
    assert c.theme.success.color == "blue"


def test_log_writes_formatted_line(out, sink):
    out.log("x", "red")
    assert written(sink) == ["\x1b[31mx\x1b[0m"]


def test_default_stream_is_stdout(registry, capsys):
    Colorizer(registry=registry, enabled=False).info("to stdout")
    assert capsys.readouterr().out == "to stdout\n"


@pytest.mark.parametrize("data", [None, "text", 42, 3.5, True])
def test_table_rejects_non_structured(out, sink, data):
    assert out.table(data, "Title") is out
    assert written(sink) == ["\x1b[31m" + TABLE_ERROR + RESET]


def test_table_with_title(out, sink):
    out.set_enabled(False)
    out.table({"Name": "Ada", "Age": "36"}, "Summary:")
    assert written(sink) == [
        "Summary:",
        "(index)  Values",
        "-------  ------",
        "Name     Ada",
        "Age      36",
    ]


def test_table_header_is_bright(out, sink):
    out.table([{"a": 1}])
    header = written(sink)[0]
    assert header.startswith(resolve("bright"))
    assert header.endswith(RESET)


def test_singleton_exists():
    assert isinstance(colorizer, Colorizer)


def test_given_registry_is_kept_even_if_falsy(registry):
    class EmptyLooking(type(registry)):
        def __bool__(self):
            return False

    isolated = EmptyLooking(theme_dir=registry.theme_dir)
    assert Colorizer(registry=isolated).registry is isolated
