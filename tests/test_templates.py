"""Tests for the Jinja2 template engine wrapper."""

import pytest

from json_typegen.codegen.core.templates import TemplateError, create_template_engine


def test_render_template(tmp_path):
    (tmp_path / "hello.txt.j2").write_text("{% if name %}\nHello {{ name }}\n{% endif %}\n")
    engine = create_template_engine(tmp_path)

    assert engine.render_template("hello.txt.j2", {"name": "Ada"}) == "Hello Ada\n"


def test_comment_filter(tmp_path):
    (tmp_path / "comment.j2").write_text("{{ text | comment }}")
    engine = create_template_engine(tmp_path)

    assert engine.render_template("comment.j2", {"text": "one\ntwo"}) == "// one\n// two"


def test_missing_template(tmp_path):
    engine = create_template_engine(tmp_path)
    with pytest.raises(TemplateError, match="not found"):
        engine.render_template("nope.j2", {})


def test_undefined_variable_is_an_error(tmp_path):
    (tmp_path / "strict.j2").write_text("{{ missing }}")
    engine = create_template_engine(tmp_path)
    with pytest.raises(TemplateError):
        engine.render_template("strict.j2", {})


def test_no_template_directory():
    engine = create_template_engine(None)
    with pytest.raises(TemplateError, match="not found"):
        engine.render_template("anything.j2", {})
