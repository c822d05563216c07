"""
Shared test fixtures for the xmlentity test suite.
"""

import pytest

from xmlentity import Document, Entity


def make_componente(nome: str, peso: str) -> Entity:
    componente = Entity("componente", "")
    componente.add_attribute("nome", nome)
    componente.add_attribute("peso", peso)
    return componente


def make_fuc(codigo: str, nome: str, ects: str, componentes=()) -> Entity:
    fuc = Entity("fuc", "")
    fuc.add_attribute("codigo", codigo)
    fuc.add_child(Entity("nome", nome))
    fuc.add_child(Entity("ects", ects))
    if componentes:
        avaliacao = Entity("avaliacao", "")
        for componente_nome, peso in componentes:
            avaliacao.add_child(make_componente(componente_nome, peso))
        fuc.add_child(avaliacao)
    return fuc


@pytest.fixture
def fuc_entity():
    """Single `fuc` entity with a `codigo` attribute and two text leaves."""
    return make_fuc("M4310", "Programação Avançada", "6.0")


@pytest.fixture
def course_document():
    """Document with two `fuc` entities, each holding an `avaliacao` wrapper."""
    document = Document("root")
    document.add_entity(
        make_fuc(
            "M4310",
            "Programação Avançada",
            "6.0",
            [("Quizzes", "20%"), ("Projeto", "80%")],
        )
    )
    document.add_entity(
        make_fuc(
            "03782",
            "Dissertação",
            "42.0",
            [("Dissertação", "60%"), ("Apresentação", "20%"), ("Discussão", "20%")],
        )
    )
    return document
