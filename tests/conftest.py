"""Shared fixtures: a small, fully specified element table."""

from __future__ import annotations

import random

import pytest

from periodic_quiz.core.models import ElementRecord
from periodic_quiz.core.quiz_manager import QuizManager

SAMPLE_ELEMENTS_DATA = [
    {"number": 1, "symbol": "H", "name": "Hydrogen", "category": "diatomic nonmetal", "xpos": 1, "ypos": 1,
     "phase": "Gas", "atomic_mass": 1.008, "density": 0.08988, "boil": 20.271},
    {"number": 2, "symbol": "He", "name": "Helium", "category": "noble gas", "xpos": 18, "ypos": 1,
     "phase": "Gas", "atomic_mass": 4.0026022, "density": 0.1786, "boil": 4.222},
    {"number": 3, "symbol": "Li", "name": "Lithium", "category": "alkali metal", "xpos": 1, "ypos": 2,
     "phase": "Solid", "atomic_mass": 6.94, "density": 0.534, "boil": 1603},
    {"number": 6, "symbol": "C", "name": "Carbon", "category": "polyatomic nonmetal", "xpos": 14, "ypos": 2,
     "phase": "Solid", "atomic_mass": 12.011, "density": 1.821, "boil": None},
    {"number": 8, "symbol": "O", "name": "Oxygen", "category": "diatomic nonmetal", "xpos": 16, "ypos": 2,
     "phase": "Gas", "atomic_mass": 15.999, "density": 1.429, "boil": 90.188},
    {"number": 11, "symbol": "Na", "name": "Sodium", "category": "alkali metal", "xpos": 1, "ypos": 3,
     "phase": "Solid", "atomic_mass": 22.98976928, "density": 0.968, "boil": 1156.09},
    {"number": 17, "symbol": "Cl", "name": "Chlorine", "category": "diatomic nonmetal", "xpos": 17, "ypos": 3,
     "phase": "Gas", "atomic_mass": 35.45, "density": 3.2, "boil": 239.11},
    {"number": 26, "symbol": "Fe", "name": "Iron", "category": "transition metal", "xpos": 8, "ypos": 4,
     "phase": "Solid", "atomic_mass": 55.8, "density": 7.874, "boil": 3134},
    {"number": 29, "symbol": "Cu", "name": "Copper", "category": "transition metal", "xpos": 11, "ypos": 4,
     "phase": "Solid", "atomic_mass": 63.546, "density": 8.96, "boil": 2835},
    {"number": 80, "symbol": "Hg", "name": "Mercury", "category": "transition metal", "xpos": 12, "ypos": 6,
     "phase": "Liquid", "atomic_mass": 200.5923, "density": 13.534, "boil": 629.88},
]


@pytest.fixture
def elements() -> tuple[ElementRecord, ...]:
    return tuple(ElementRecord.from_dict(entry) for entry in SAMPLE_ELEMENTS_DATA)


@pytest.fixture
def iron(elements) -> ElementRecord:
    return next(element for element in elements if element.symbol == "Fe")


@pytest.fixture
def rng() -> random.Random:
    return random.Random(1234)


@pytest.fixture
def quiz_manager(elements) -> QuizManager:
    return QuizManager(elements, rng=random.Random(42))
