from typing import Iterator

import pytest

from navmap.navigation.rows import (
    TextFragment,
    reconstruct_lines,
    reconstruct_rows,
    split_row,
)


def broken_page() -> Iterator[TextFragment]:
    yield TextFragment("Visible before failure", 700)
    raise RuntimeError("corrupt content stream")


def test_fragments_on_the_same_band_share_a_row() -> None:
    page = [
        TextFragment("About Us", 700),
        TextFragment("What We Do", 701.4),
        TextFragment("Our Mission", 680),
        TextFragment("Service One", 678.6),
    ]
    assert reconstruct_lines([page]) == [
        "About Us | What We Do",
        "Our Mission | Service One",
    ]


def test_rows_are_ordered_top_of_page_first() -> None:
    page = [TextFragment("Bottom", 100), TextFragment("Top", 800), TextFragment("Middle", 400)]
    assert reconstruct_lines([page]) == ["Top", "Middle", "Bottom"]


def test_cells_keep_extraction_order_within_a_row() -> None:
    page = [TextFragment("Second", 300), TextFragment("First", 301)]
    assert reconstruct_lines([page]) == ["Second | First"]


def test_bucket_boundary_rounds_half_up() -> None:
    # 2.5 / 5 rounds up to bucket 5, 2.4 rounds down to bucket 0
    page = [TextFragment("A", 2.5), TextFragment("B", 5), TextFragment("C", 2.4)]
    assert reconstruct_lines([page]) == ["A | B", "C"]


def test_fragments_without_position_share_the_default_row() -> None:
    page = [
        {"text": "No position"},
        {"text": "Heading", "y": 500},
        {"text": "Also unplaced", "y": None},
        {"text": "Bad coordinate", "y": float("nan")},
    ]
    assert reconstruct_lines([page]) == ["Heading", "No position | Also unplaced | Bad coordinate"]


def test_blank_fragments_are_discarded() -> None:
    page = [TextFragment("  ", 500), TextFragment("", 400), TextFragment("Kept", 300)]
    assert reconstruct_lines([page]) == ["Kept"]


def test_pages_are_concatenated_in_order() -> None:
    first = [TextFragment("Page one low", 50)]
    second = [TextFragment("Page two high", 800)]
    assert reconstruct_lines([first, second]) == ["Page one low", "Page two high"]


def test_failing_and_empty_pages_are_skipped() -> None:
    good = [TextFragment("Kept", 100)]
    assert reconstruct_lines([broken_page(), [], good]) == ["Kept"]


def test_all_pages_failing_returns_no_rows() -> None:
    assert reconstruct_lines([broken_page(), broken_page()]) == []


def test_custom_tolerance_and_separator() -> None:
    page = [TextFragment("A", 100), TextFragment("B", 108)]
    assert reconstruct_lines([page], tolerance=20, separator=" ; ") == ["A ; B"]
    assert reconstruct_lines([page], tolerance=0) == ["B", "A"]


@pytest.mark.parametrize("tolerance", [float("nan"), float("inf"), float("-inf")])
def test_non_finite_tolerance_falls_back_to_default(tolerance: float) -> None:
    page = [TextFragment("A", 100), TextFragment("B", 102), TextFragment("C", 90)]
    assert reconstruct_lines([page], tolerance=tolerance) == ["A | B", "C"]


def test_split_row() -> None:
    assert split_row("About Us | | What We Do |") == ["About Us", "What We Do"]
    assert split_row("A ; B", " ; ") == ["A", "B"]
    assert split_row("   ") == []


def test_reconstruct_rows_splits_cells() -> None:
    page = [TextFragment("About Us", 700), TextFragment("News", 700), TextFragment("Team", 650)]
    assert reconstruct_rows([page]) == [["About Us", "News"], ["Team"]]
