"""
Tests de la configuration de la journalisation.
pytest installe ses propres handlers sur le logger racine : on les retire le temps du test.
"""

import logging

import pytest

from studentapi.logging_config import LOG_FORMAT, setup_logging


@pytest.fixture
def root_vierge(monkeypatch):
    root = logging.getLogger()
    niveau = root.level
    monkeypatch.setattr(root, "handlers", [])
    yield root
    root.setLevel(niveau)


def test_setup_logging_ajoute_un_handler_console(root_vierge):
    setup_logging("DEBUG")

    stream_handlers = [h for h in root_vierge.handlers if isinstance(h, logging.StreamHandler)]
    assert len(stream_handlers) == 1
    assert stream_handlers[0].formatter._fmt == LOG_FORMAT
    assert root_vierge.level == logging.DEBUG


def test_setup_logging_idempotent(root_vierge):
    setup_logging("DEBUG")
    setup_logging("DEBUG")

    assert len(root_vierge.handlers) == 1
    assert root_vierge.level == logging.DEBUG


def test_setup_logging_ne_touche_pas_une_config_existante(root_vierge):
    existant = logging.NullHandler()
    root_vierge.addHandler(existant)

    setup_logging("DEBUG")

    assert root_vierge.handlers == [existant]


def test_setup_logging_niveau_inconnu_info(root_vierge):
    setup_logging("bavard")
    assert root_vierge.level == logging.INFO
