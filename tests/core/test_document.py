"""
Tests for Document whole-tree operations.

Focus Areas:
1. Adding and removing root-level entities
2. Whole-tree renaming of entities and attributes
3. Whole-tree removal of entities and attributes
"""

import pytest

from xmlentity import Document, Entity, ValidationError


def names_in(document):
    names = []
    document.accept(lambda entity: names.append(entity.name) or True)
    return names


class TestDocumentConstruction:
    def test_root_is_empty_wrapper(self):
        document = Document("root")

        assert document.root_name == "root"
        assert document.root.name == "root"
        assert document.root.text == ""
        assert document.root.children == []


class TestAddRemoveEntity:
    """Test root-level entity management."""

    def test_add_entity_appends_to_root(self, fuc_entity):
        document = Document("root")
        document.add_entity(fuc_entity)

        assert document.root.children == [fuc_entity]

    def test_add_entity_with_invalid_name_fails(self):
        """Invalid names fail with the entity message and leave the tree untouched."""
        document = Document("root")
        entity = Entity("fuc@", "")
        entity.add_attribute("codigo", "M4310")

        with pytest.raises(ValidationError) as exc_info:
            document.add_entity(entity)

        assert str(exc_info.value) == "The name of the entity must contain only letters."
        assert document.root.children == []

    def test_remove_entity(self, fuc_entity):
        document = Document("root")
        document.add_entity(fuc_entity)
        document.add_entity(Entity("other"))

        document.remove_entity(fuc_entity)

        assert [e.name for e in document.root.children] == ["other"]

    def test_remove_entity_only_looks_at_root_children(self, course_document):
        nested = course_document.root.children[0].children[0]

        course_document.remove_entity(nested)

        assert course_document.root.children[0].children[0] is nested


class TestRenaming:
    """Test whole-tree rename operations."""

    def test_rename_entities_at_any_depth(self, course_document):
        course_document.rename_entities("componente", "component")

        names = names_in(course_document)
        assert "componente" not in names
        assert names.count("component") == 5

    def test_rename_entities_top_level(self, fuc_entity):
        document = Document("root")
        document.add_entity(fuc_entity)

        document.rename_entities("fuc", "disciplina")

        assert names_in(document) == ["root", "disciplina", "nome", "ects"]

    def test_rename_attributes_only_on_named_entities(self, course_document):
        course_document.rename_attributes("fuc", "codigo", "id")
        course_document.rename_attributes("componente", "nome", "name")

        fuc = course_document.root.children[0]
        componente = fuc.children[2].children[0]
        assert fuc.attributes == {"id": "M4310"}
        assert list(componente.attributes) == ["peso", "name"]

    def test_rename_attributes_absent_attribute_is_noop(self, fuc_entity):
        document = Document("root")
        document.add_entity(fuc_entity)

        document.rename_attributes("fuc", "missing", "other")

        assert fuc_entity.attributes == {"codigo": "M4310"}


class TestRemoval:
    """Test whole-tree removal operations."""

    def test_remove_entities_nested(self):
        document = Document("root")
        fuc = Entity("fuc", "")
        fuc.add_attribute("codigo", "03782")
        fuc.add_child(Entity("nome", "Dissertação"))
        fuc.add_child(Entity("ects", "42.0"))
        document.add_entity(fuc)

        document.remove_entities("nome")

        assert names_in(document) == ["root", "fuc", "ects"]

    def test_remove_entities_at_every_level(self, course_document):
        """Matches are removed wherever they occur, in a single pass."""
        course_document.add_entity(Entity("ects", "1"))

        course_document.remove_entities("ects")

        assert "ects" not in names_in(course_document)
        assert len(course_document.root.children) == 2

    def test_remove_entities_drops_whole_subtrees(self, course_document):
        course_document.remove_entities("avaliacao")

        names = names_in(course_document)
        assert "avaliacao" not in names
        assert "componente" not in names

    def test_remove_attributes(self, course_document):
        course_document.remove_attributes("componente", "peso")

        componentes = []
        course_document.accept(
            lambda e: (e.name == "componente" and componentes.append(e)) or True
        )
        assert len(componentes) == 5
        assert all(list(c.attributes) == ["nome"] for c in componentes)

    def test_remove_attributes_leaves_other_entities(self, course_document):
        course_document.remove_attributes("fuc", "nome")

        componente = course_document.root.children[0].children[2].children[0]
        assert "nome" in componente.attributes
