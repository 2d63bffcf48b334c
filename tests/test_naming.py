import pytest

from identnorm.core import (
    ROLE_CASES,
    Identifier,
    IdentName,
    IdentRole,
    Name,
    NamingCase,
    StrIdentName,
    Symbol,
    convert,
    convert_case,
)

UPPER_CAMEL_ROLES = [IdentRole.STRUCT, IdentRole.ENUM, IdentRole.TRAIT, IdentRole.NEWTYPE, IdentRole.VARIANT]
SNAKE_ROLES = [IdentRole.MOD, IdentRole.FN, IdentRole.FIELD]


def test_role_table_covers_every_role():
    assert set(ROLE_CASES) == set(IdentRole)
    assert all(ROLE_CASES[role] == NamingCase.UPPER_CAMEL for role in UPPER_CAMEL_ROLES)
    assert all(ROLE_CASES[role] == NamingCase.SNAKE for role in SNAKE_ROLES)
    assert ROLE_CASES[IdentRole.CONST] == NamingCase.SHOUTY_SNAKE


class TestRoleMethods:
    name = Name("user_IDs")

    def test_type_like_roles(self):
        assert self.name.struct_ident() == "UserIDs"
        assert self.name.enum_ident() == "UserIDs"
        assert self.name.trait_ident() == "UserIDs"
        assert self.name.newtype_ident() == "UserIDs"
        assert self.name.variant_ident() == "UserIDs"

    def test_snake_roles(self):
        assert self.name.mod_ident(False) == "user_i_ds"
        assert self.name.fn_ident(False) == "user_i_ds"
        assert self.name.field_ident(False) == "user_i_ds"
        assert self.name.field_ident(True) == "user_ids"
        assert self.name.mod_ident(True) == "user_ids"

    def test_const_role(self):
        assert self.name.const_ident(False) == "USER_I_DS"
        assert self.name.const_ident(True) == "USER_IDS"

    def test_receiver_unchanged(self):
        self.name.field_ident(True)
        assert self.name == "user_IDs"


def test_upper_camel_on_acronym_runs():
    assert Name("user_IDs").struct_ident() == "UserIDs"
    assert Name("http_server").struct_ident() == "HttpServer"
    assert Name("HTTPServer").struct_ident() == "HttpServer"


@pytest.mark.parametrize("role", list(IdentRole))
@pytest.mark.parametrize("nonstandard", [False, True])
def test_ident_dispatch_matches_convert(role, nonstandard):
    for text in ["UserID", "max_retries", "_private", "Self", ""]:
        assert Name(text).ident(role, nonstandard) == convert(text, role, nonstandard)


def test_field_end_to_end():
    # The ID acronym stays one word under the rustc splitter
    assert Name("UserID").field_ident(nonstandard=True) == "user_id"
    assert Name("UserIDs").field_ident(nonstandard=True) == "user_ids"
    assert Name("UserIDs").field_ident(nonstandard=False) == "user_i_ds"


def test_empty_name_is_empty_in_every_role():
    for role in IdentRole:
        assert convert("", role, True) == ""
        assert convert("", role, False) == ""


def test_convert_case_rejects_unknown_case():
    with pytest.raises(ValueError):
        convert_case("x", "kebab")


def test_symbol_and_identifier_use_raw_text():
    assert Symbol("type").struct_ident() == "Type"
    assert Identifier("max_size").const_ident() == "MAX_SIZE"
    assert Identifier("Self").field_ident() == "self"


def test_name_is_a_str():
    name = Name("abc")
    assert isinstance(name, str)
    assert isinstance(name, IdentName)
    assert name.upper() == "ABC"
    assert name.as_str() == "abc"


class ShoutyVariants(StrIdentName):
    """Implementer overriding a single role."""

    def __init__(self, text):
        self.text = text

    def as_str(self):
        return self.text

    def variant_ident(self):
        return self.shouty_snake_case(False)


def test_role_override_in_subclass():
    value = ShoutyVariants("not_found")
    assert value.variant_ident() == "NOT_FOUND"
    assert value.ident(IdentRole.VARIANT) == "NOT_FOUND"
    assert value.struct_ident() == "NotFound"


def test_abstract_primitives_required():
    with pytest.raises(TypeError):
        IdentName()
