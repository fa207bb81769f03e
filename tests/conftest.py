"""
Shared test fixtures for the choicetree test suite.
"""

import pytest

from choicetree import NUMBER, STRING, Builder, FieldSpec, SchemaDefinition, SchemaNode


@pytest.fixture
def character_schema():
    """Root with a required name and a class whose mage option unlocks a spell."""
    return SchemaDefinition(
        fields={
            "name": FieldSpec(options=STRING, required=True),
            "class": FieldSpec(
                required=True,
                options={
                    "warrior": SchemaNode(),
                    "mage": SchemaNode(
                        fields={"spell": FieldSpec(options=STRING, required=True)}
                    ),
                },
            ),
        }
    )


@pytest.fixture
def spellbook_schema():
    """Three levels deep, with a numeric field guarded by a predicate.

    class=mage unlocks spell and school; school=fire unlocks element.
    """
    return SchemaDefinition.from_dict(
        {
            "fields": {
                "name": {"options": STRING, "required": True},
                "level": {"options": NUMBER, "validation": lambda v: 1 <= v <= 20},
                "class": {
                    "required": True,
                    "options": {
                        "warrior": {},
                        "mage": {
                            "fields": {
                                "spell": {"options": STRING, "required": True},
                                "school": {
                                    "options": {
                                        "fire": {
                                            "fields": {"element": {"options": STRING}}
                                        },
                                        "frost": {},
                                    }
                                },
                            }
                        },
                    },
                },
            }
        }
    )


@pytest.fixture
def branching_schema():
    """Two chosen root branches, one of which nests a further branch."""
    return SchemaDefinition.from_dict(
        {
            "fields": {
                "a": {
                    "options": {
                        "x": {
                            "fields": {
                                "a1": {
                                    "options": {
                                        "y": {"fields": {"deep": {"options": STRING}}}
                                    }
                                },
                                "a2": {"options": STRING},
                            }
                        }
                    }
                },
                "b": {"options": {"z": {"fields": {"b1": {"options": STRING}}}}},
            }
        }
    )


@pytest.fixture
def character(character_schema):
    """Empty builder over the character schema."""
    return Builder(schema=character_schema)
