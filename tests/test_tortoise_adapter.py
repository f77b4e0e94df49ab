# -*- coding: utf-8 -*-
"""
test_tortoise_adapter

Field descriptions built from Tortoise model metadata.

Version:0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from __future__ import annotations

import asyncio

import pytest
from tortoise import Tortoise, fields, models

from fieldadmin.adapters.tortoise import TortoiseFieldDescriptionFactory, association_type
from fieldadmin.core.choices import AssociationType
from fieldadmin.core.exceptions import FieldNotFoundError
from tests.conftest import AdminStub


class Author(models.Model):
    id = fields.IntField(pk=True)
    name = fields.CharField(max_length=100)


class Tag(models.Model):
    id = fields.IntField(pk=True)
    label = fields.CharField(max_length=30, unique=True)


class Book(models.Model):
    id = fields.IntField(pk=True)
    title = fields.CharField(max_length=200)
    author = fields.ForeignKeyField("models.Author", related_name="books")
    tags = fields.ManyToManyField("models.Tag", related_name="books")
    summary = fields.TextField(null=True)


class TestTortoiseFieldDescriptionFactory:
    """Mapping extraction for data and relation fields."""

    @classmethod
    def setup_class(cls) -> None:
        asyncio.run(
            Tortoise.init(
                db_url="sqlite://:memory:",
                modules={"models": [__name__]},
            )
        )

    @classmethod
    def teardown_class(cls) -> None:
        asyncio.run(Tortoise.close_connections())

    def setup_method(self) -> None:
        self.factory = TortoiseFieldDescriptionFactory()

    def test_plain_field(self) -> None:
        admin = AdminStub("book_admin")
        fd = self.factory.create(Book, "title", {"label": "Title"}, admin=admin)
        assert fd.admin is admin
        assert fd.label == "Title"
        assert fd.association_mapping is None
        assert fd.field_mapping == {
            "field_name": "title",
            "type": "CharField",
            "nullable": False,
            "unique": False,
            "primary_key": False,
            "max_length": 200,
        }
        assert fd.mapping_type == "CharField"
        assert fd.is_association() is False

    def test_primary_key(self) -> None:
        fd = self.factory.create(Book, "id")
        assert fd.is_primary_key() is True

    def test_nullable_field(self) -> None:
        fd = self.factory.create(Book, "summary")
        assert fd.field_mapping["nullable"] is True

    def test_foreign_key(self) -> None:
        fd = self.factory.create(Book, "author")
        assert fd.mapping_type is AssociationType.MANY_TO_ONE
        assert fd.target_model == "models.Author"
        assert fd.association_mapping["field_name"] == "author"
        assert fd.field_mapping is None

    def test_many_to_many(self) -> None:
        fd = self.factory.create(Book, "tags", {"type": "choices"})
        assert fd.type == "choices"
        assert fd.mapping_type is AssociationType.MANY_TO_MANY
        assert fd.target_model == "models.Tag"

    def test_backward_relation(self) -> None:
        fd = self.factory.create(Author, "books")
        assert fd.mapping_type is AssociationType.ONE_TO_MANY

    def test_dotted_name(self) -> None:
        fd = self.factory.create(Book, "author.name")
        assert fd.field_name == "name"
        assert [m["field_name"] for m in fd.parent_association_mappings] == ["author"]
        assert fd.field_mapping["max_length"] == 100

    def test_unknown_field(self) -> None:
        with pytest.raises(FieldNotFoundError) as info:
            self.factory.create(Book, "isbn")
        assert info.value.owner == "Book"

    def test_dotted_name_through_data_field(self) -> None:
        with pytest.raises(FieldNotFoundError):
            self.factory.create(Book, "title.length")

    def test_association_type_of_data_field(self) -> None:
        assert association_type(Book._meta.fields_map["title"]) is None


# The End
