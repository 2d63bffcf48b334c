import pytest

from identnorm.core import (
    EnumRepr,
    Identifier,
    Namer,
    NamingConfig,
    Symbol,
    TemplateEngine,
    TemplateError,
    create_template_engine,
)


def test_struct_template(engine):
    code = engine.render_template(
        "rust_struct",
        {
            "name": "user_record",
            "fields": [
                {"name": "UserID", "type": "u64"},
                {"name": "type", "type": "String"},
            ],
        },
    )
    assert code == (
        "pub struct UserRecord {\n"
        "    pub user_id: u64,\n"
        "    pub r#type: String,\n"
        "}\n"
    )


def test_enum_template(engine):
    code = engine.render_template(
        "rust_enum",
        {
            "name": "status",
            "repr": EnumRepr.I32,
            "variants": [{"name": "not_found", "value": 404}, {"name": "self", "value": 1}],
        },
    )
    assert code == (
        "#[repr(i32)]\n"
        "pub enum Status {\n"
        "    NotFound = 404,\n"
        "    Self_ = 1,\n"
        "}\n"
    )


def test_const_template_follows_namer_mode():
    engine = create_template_engine(namer=Namer(NamingConfig(nonstandard=True)))
    code = engine.render_template("rust_const", {"name": "MaxIDs", "type": "usize", "value": 8})
    assert code == "pub const MAX_IDS: usize = 8;\n"


def test_filters(engine):
    assert engine.render_string("{{ n | ident }}", {"n": "async"}) == "r#async"
    assert engine.render_string("{{ n | ident }}", {"n": Identifier("Self")}) == "Self_"
    assert engine.render_string("{{ n | upper_camel }}", {"n": "http_server"}) == "HttpServer"
    assert engine.render_string("{{ n | snake }}", {"n": "IDs"}) == "i_ds"
    assert engine.render_string("{{ n | snake(true) }}", {"n": "IDs"}) == "ids"
    assert engine.render_string("{{ n | shouty_snake(true) }}", {"n": "IDs"}) == "IDS"
    assert engine.render_string("{{ n | mod_ident }}", {"n": Symbol("Crate")}) == "r#crate"
    assert engine.render_string("{{ n | trait_ident }}", {"n": "dyn"}) == "Dyn"


def test_template_directory(tmp_path):
    (tmp_path / "field.rs.j2").write_text("{{ name | field_ident }}", encoding="utf-8")
    engine = TemplateEngine(tmp_path)
    assert engine.render_template("field.rs.j2", {"name": "Where"}) == "r#where"


def test_add_template_switches_to_memory(tmp_path):
    engine = TemplateEngine(tmp_path)
    engine.add_template("fn", "fn {{ name | fn_ident }}()")
    assert engine.render_template("fn", {"name": "GetIDs"}) == "fn get_i_ds()"


def test_missing_template(engine):
    with pytest.raises(TemplateError):
        engine.render_template("nope", {})


def test_syntax_error(engine):
    with pytest.raises(TemplateError) as excinfo:
        engine.render_string("{{ name | }}", {})
    assert excinfo.value.__cause__ is not None
