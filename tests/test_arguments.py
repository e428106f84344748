"""Tests for shallow argument validation."""

import pytest

from raycast_mcp.validators.arguments import (
    BuildExtensionArgs,
    CreateExtensionArgs,
    parse_build_extension_args,
    parse_create_extension_args,
    parse_publish_extension_args,
    validate,
)


class TestCreateExtensionArgs:

    def test_minimal(self):
        args = parse_create_extension_args({"name": "foo", "title": "Foo"})

        assert isinstance(args, CreateExtensionArgs)
        assert args.name == "foo"
        assert args.title == "Foo"
        assert args.path is None
        assert args.mode is None

    @pytest.mark.parametrize("raw", [
        None,
        "foo",
        42,
        ["foo", "Foo"],
        {"name": "foo"},
        {"title": "Foo"},
        {"name": 1, "title": "Foo"},
        {"name": "foo", "title": ["Foo"]},
    ])
    def test_rejects_bad_shapes(self, raw):
        assert parse_create_extension_args(raw) is None

    def test_enum_values_are_not_enforced(self):
        args = parse_create_extension_args({
            "name": "foo",
            "title": "Foo",
            "mode": "sideways",
            "language": "cobol",
            "template": 3,
        })

        assert args is not None
        assert args.mode == "sideways"
        assert args.language == "cobol"
        assert args.template == 3

    def test_unknown_keys_tolerated(self):
        assert parse_create_extension_args({"name": "foo", "title": "Foo", "extra": True})


class TestBuildAndPublishArgs:

    def test_build(self):
        args = parse_build_extension_args({"path": "/x", "mode": "production"})
        assert isinstance(args, BuildExtensionArgs)
        assert args.mode == "production"

    def test_build_requires_string_path(self):
        assert parse_build_extension_args({"path": None}) is None
        assert parse_build_extension_args({"mode": "production"}) is None

    def test_publish_version_optional(self):
        assert parse_publish_extension_args({"path": "/x"}).version is None
        assert parse_publish_extension_args({"path": "/x", "version": "2.0.0"}).version == "2.0.0"

    def test_publish_requires_path(self):
        assert parse_publish_extension_args({"version": "2.0.0"}) is None


class TestValidate:

    @pytest.mark.parametrize("name,raw,expected", [
        ("create_extension", {"name": "a", "title": "A"}, True),
        ("create_extension", {"name": "a"}, False),
        ("build_extension", {"path": "/x"}, True),
        ("build_extension", None, False),
        ("publish_extension", {"path": "/x", "version": 2}, True),
        ("publish_extension", {}, False),
        ("rename_extension", {"path": "/x"}, False),
    ])
    def test_validate(self, name, raw, expected):
        assert validate(name, raw) is expected
