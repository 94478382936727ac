"""Test matching subjects against compiled patterns."""

from unittest.mock import Mock

import pytest

from path_pattern import (
    CompiledPattern,
    Match,
    MatchError,
    Options,
    execute,
    match,
    path_to_regexp,
)


def test_execute_named_parameter():
    """Round trip a named parameter."""
    compiled = path_to_regexp("/user/:name")
    assert execute("/user/john", compiled) == [Match(name="name", value="john")]
    assert execute("/user/john/", compiled) == [Match(name="name", value="john")]
    assert execute("/user/", compiled) is None
    assert execute("/user/john/doe", compiled) is None


def test_execute_optional_parameter():
    """Absent optional parameters produce no entry."""
    compiled = path_to_regexp("/photos/:id?")
    assert execute("/photos", compiled) == []
    assert execute("/photos/", compiled) == []
    assert execute("/photos/1", compiled) == [Match(name="id", value="1")]


def test_execute_one_or_more():
    """One or more repetitions are captured together."""
    compiled = path_to_regexp("/:path+")
    assert execute("/a/b/c", compiled) == [Match(name="path", value="a/b/c")]
    assert execute("/a", compiled) == [Match(name="path", value="a")]
    assert execute("/", compiled) is None
    assert execute("", compiled) is None


def test_execute_zero_or_more():
    """Zero repetitions drop the prefix as well."""
    compiled = path_to_regexp("/files/:path*")
    assert execute("/files", compiled) == []
    assert execute("/files/a/b", compiled) == [Match(name="path", value="a/b")]


def test_execute_repeat_custom_pattern():
    """Each repetition must match the custom pattern."""
    compiled = path_to_regexp(r"/ids/:id(\d+)+")
    assert execute("/ids/1/22/333", compiled) == [Match(name="id", value="1/22/333")]
    assert execute("/ids/1/x", compiled) is None


def test_execute_repeat_custom_pattern_with_delimiter():
    """A custom pattern may itself consume delimiters."""
    compiled = path_to_regexp("/docs/:rest(.+)+")
    assert execute("/docs/a/b", compiled) == [Match(name="rest", value="a/b")]


def test_execute_case_sensitivity():
    """Case is ignored unless sensitive is set."""
    assert execute("/user", path_to_regexp("/User")) == []
    assert execute("/user", path_to_regexp("/User", Options(sensitive=True))) is None
    assert execute("/User", path_to_regexp("/User", Options(sensitive=True))) == []


def test_execute_custom_pattern():
    """Custom patterns restrict accepted values."""
    compiled = path_to_regexp(r"/icon-:foo(\d+).png")
    assert execute("/icon-76.png", compiled) == [Match(name="foo", value="76")]
    assert execute("/icon-abc.png", compiled) is None


def test_execute_unnamed_groups():
    """Unnamed groups are reported under their index."""
    compiled = path_to_regexp("/route/:foo/(.*)")
    assert execute("/route/x/a/b", compiled) == [
        Match(name="foo", value="x"),
        Match(name="0", value="a/b"),
    ]


def test_execute_prefixes_option():
    """Dots can act as prefixes."""
    compiled = path_to_regexp("/:file.:ext?", Options(prefixes="./"))
    assert execute("/report.tar.gz", compiled) == [
        Match(name="file", value="report.tar"),
        Match(name="ext", value="gz"),
    ]
    assert execute("/report", compiled) == [Match(name="file", value="report")]


def test_execute_strict():
    """Strict patterns reject a trailing delimiter."""
    compiled = path_to_regexp("/test", Options(strict=True))
    assert execute("/test", compiled) == []
    assert execute("/test/", compiled) is None


def test_execute_no_end():
    """Without end anchoring only a prefix of the subject must match."""
    compiled = path_to_regexp("/test", Options(end=False))
    assert execute("/test", compiled) == []
    assert execute("/test/route", compiled) == []
    assert execute("/testing", compiled) is None


def test_execute_no_start():
    """Without start anchoring the match may begin anywhere."""
    compiled = path_to_regexp("/:id", Options(start=False))
    assert execute("/api/42", compiled) == [Match(name="id", value="42")]


def test_execute_ends_with():
    """ends_with characters terminate the match."""
    compiled = path_to_regexp("/test/:id", Options(ends_with="?#"))
    assert execute("/test/1?x=1", compiled) == [Match(name="id", value="1")]
    assert execute("/test/1#top", compiled) == [Match(name="id", value="1")]
    assert execute("/test/1", compiled) == [Match(name="id", value="1")]
    assert execute("/test/1/x", compiled) is None


def test_execute_empty_pattern():
    """The empty pattern only matches an empty path."""
    compiled = path_to_regexp("")
    assert execute("", compiled) == []
    assert execute("/", compiled) == []
    assert execute("/a", compiled) is None


def test_execute_trailing_newline_rejected():
    """The end anchor does not accept a trailing newline."""
    assert execute("/user/john\n", path_to_regexp("/user/:name")) is None


@pytest.mark.parametrize(
    "pattern,values",
    [
        ("/:a", {"a": "x"}),
        ("/:a/:b", {"a": "one", "b": "two-2"}),
        ("/shop/:category/items/:item", {"category": "books", "item": "1.5"}),
        ("/:a-:b", {"a": "left", "b": "right"}),
    ],
)
def test_execute_substituted_values(pattern, values):
    """Substituted non-delimiter values are recovered by name."""
    subject = pattern
    for name, value in values.items():
        subject = subject.replace(f":{name}", value)
    result = execute(subject, path_to_regexp(pattern))
    assert result is not None
    assert {m.name: m.value for m in result} == values


def test_match_param_names():
    """Callers can supply the parameter names."""
    compiled = path_to_regexp("/user/:name")
    assert match("/user/john", compiled, ["who"]) == [Match(name="who", value="john")]
    assert match("/user/john", compiled) == execute("/user/john", compiled)


def test_match_param_names_length():
    """One name per capture group is required."""
    compiled = path_to_regexp("/user/:name")
    with pytest.raises(ValueError):
        match("/user/john", compiled, ["a", "b"])


def test_match_engine_failure():
    """Engine failures raise MatchError instead of returning no match."""
    regexp = Mock(groups=0, pattern="^x$")
    regexp.search.side_effect = RecursionError("maximum recursion depth exceeded")
    compiled = CompiledPattern(regexp=regexp, keys=(), options=Options())
    with pytest.raises(MatchError) as exc:
        execute("x", compiled)
    assert isinstance(exc.value.__cause__, RecursionError)


def test_compiled_pattern_reused():
    """A compiled pattern can be used for many subjects."""
    compiled = path_to_regexp("/user/:name")
    results = [execute(f"/user/{name}", compiled) for name in ["a", "b", "c"]]
    assert [r[0].value for r in results] == ["a", "b", "c"]
