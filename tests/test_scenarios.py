"""
End-to-end scenarios: build or map a tree, edit it, render it.

Each scenario compares the rendered document with a golden string after
whitespace normalisation.
"""

import pytest

from xmlentity import Document, Entity, ValidationError, normalize_xml

DECLARATION = '<?xml version = "1.0" encoding = "UTF-8"?>'


def golden(body: str) -> str:
    return normalize_xml(DECLARATION + body)


class TestEditingScenarios:
    def test_add_entity(self, fuc_entity, tmp_path):
        document = Document("root")
        document.add_entity(fuc_entity)
        path = document.create_xml_file(tmp_path, "testAddEntity_output.xml")

        assert normalize_xml(path.read_text(encoding="utf-8")) == golden(
            """
            <root>
                <fuc codigo="M4310">
                    <nome>Programação Avançada</nome>
                    <ects>6.0</ects>
                </fuc>
            </root>
            """
        )

    def test_rename_entity_and_child(self, fuc_entity):
        document = Document("root")
        ects = fuc_entity.children[1]
        fuc_entity.rename_child(ects.name, ects.name[::-1])
        document.add_entity(fuc_entity)

        document.rename_entities("fuc", "disciplina")

        assert normalize_xml(document.pretty_print()) == golden(
            """
            <root>
                <disciplina codigo="M4310">
                    <nome>Programação Avançada</nome>
                    <stce>6.0</stce>
                </disciplina>
            </root>
            """
        )

    def test_rename_attributes(self, fuc_entity):
        avaliacao = Entity("avaliacao", "")
        for nome, peso in [("Projeto", "80%"), ("Quizzs", "20%")]:
            componente = Entity("componente", "")
            componente.add_attribute("nome", nome)
            componente.add_attribute("peso", peso)
            avaliacao.add_child(componente)
        fuc_entity.add_child(avaliacao)
        document = Document("root")
        document.add_entity(fuc_entity)

        document.rename_attributes("fuc", "codigo", "id")
        document.rename_attributes("componente", "nome", "name")

        assert normalize_xml(document.pretty_print()) == golden(
            """
            <root>
                <fuc id="M4310">
                    <nome>Programação Avançada</nome>
                    <ects>6.0</ects>
                    <avaliacao>
                        <componente peso="80%" name="Projeto"/>
                        <componente peso="20%" name="Quizzs"/>
                    </avaliacao>
                </fuc>
            </root>
            """
        )

    def test_remove_attribute(self, fuc_entity):
        document = Document("root")
        document.add_entity(fuc_entity)

        document.remove_attributes("fuc", "codigo")

        assert normalize_xml(document.pretty_print()) == golden(
            """
            <root>
                <fuc>
                    <nome>Programação Avançada</nome>
                    <ects>6.0</ects>
                </fuc>
            </root>
            """
        )

    @pytest.mark.parametrize("name", ["fuc@", "fuc 1", "fuc-x"])
    def test_invalid_name_leaves_document_unchanged(self, course_document, name):
        before = course_document.pretty_print()

        with pytest.raises(ValidationError):
            course_document.add_entity(Entity(name))

        assert course_document.pretty_print() == before
