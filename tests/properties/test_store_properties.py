"""Property-based tests for appended-markdown block editing.

Verifies:
- Idempotence: installing the same block twice yields the same text.
- Uniqueness: after any install sequence each id has exactly one marker.
- Last write wins: a block always holds the latest content for its id.
- Remove inverts insert for ids that were present.
"""
from __future__ import annotations

from hypothesis import given, settings
from hypothesis import strategies as st

from skillport.install.store import list_blocks, read_block, remove_block, upsert_block

skill_ids = st.sampled_from(["alpha", "beta", "gamma", "alpha-2", "b"])

# Block bodies never contain a marker and are never blank.
bodies = st.text(
    alphabet=st.characters(blacklist_categories=("Cs",), blacklist_characters="<\r"),
    min_size=1,
    max_size=40,
).filter(lambda body: body.strip())

installs = st.lists(st.tuples(skill_ids, bodies), min_size=1, max_size=8)


def _apply(sequence: list[tuple[str, str]]) -> str:
    text = ""
    for skill_id, body in sequence:
        text, _ = upsert_block(text, skill_id, "o/r", body)
    return text


class TestBlockProperties:
    @given(sequence=installs)
    @settings(max_examples=200)
    def test_one_marker_per_id(self, sequence: list[tuple[str, str]]) -> None:
        text = _apply(sequence)
        ids = [skill_id for skill_id, _ in list_blocks(text)]
        assert sorted(ids) == sorted({skill_id for skill_id, _ in sequence})

    @given(sequence=installs)
    @settings(max_examples=200)
    def test_last_write_wins(self, sequence: list[tuple[str, str]]) -> None:
        text = _apply(sequence)
        latest = dict(sequence)
        for skill_id, body in latest.items():
            assert read_block(text, skill_id) == body.rstrip("\n")

    @given(sequence=installs)
    def test_reinstall_is_idempotent(self, sequence: list[tuple[str, str]]) -> None:
        text = _apply(sequence)
        skill_id, body = sequence[-1]
        again, replaced = upsert_block(text, skill_id, "o/r", body)
        assert replaced is True
        assert again == text

    @given(sequence=installs)
    def test_remove_every_block(self, sequence: list[tuple[str, str]]) -> None:
        text = _apply(sequence)
        for skill_id in {skill_id for skill_id, _ in sequence}:
            text, removed = remove_block(text, skill_id)
            assert removed is True
        assert list_blocks(text) == []
