import pytest

from fusion_names.normalization import fix_name
from fusion_names.splice import combine, head_count, tail_count
from fusion_names.structures import FusionConfig, SpliceRatios


def test_combine_uses_primary_ratios():
    assert combine("Charmander", "Pikachu") == "Pikacder"
    assert combine("Pikachu", "Charmander") == "Charmanchu"


def test_combine_uses_secondary_ratios():
    assert combine("Eevee", "Abc", use_secondary_ratios=True) == "Aevee"


def test_combine_removes_doubled_seam():
    assert combine("Lato", "Kita") == "Kito"
    assert combine("Otto", "Kita") == "Kitto"


def test_combine_handles_empty_names():
    assert combine("Eevee", "") == "ee"
    assert combine("", "Eevee") == "Eeve"
    assert combine("", "") == ""


def test_combine_with_custom_ratios():
    config = FusionConfig(primary=SpliceRatios(head=1.0, tail=0.3))
    assert combine("Ivysaur", "Bulbasaur", config=config) == "Bulbasaur"


def test_head_count_is_exact_for_decimal_ratios():
    assert head_count(10, 0.7) == 7
    assert head_count(7, 0.7) == 5


def test_head_count_shrinks_long_full_names_only():
    assert head_count(9, 1.0) == 8
    assert head_count(3, 1.0) == 3
    assert head_count(0, 0.7) == 0


def test_tail_count_rules():
    assert tail_count(10, 7, 0.3) == 3
    assert tail_count(3, 1, 0.3) == 2
    assert tail_count(5, 3, 0.8) == 4
    assert tail_count(6, 6, 1.0) == 5


def test_tail_count_ignores_ratio_when_head_is_empty():
    assert tail_count(5, 0, 0.3) == 2


def test_tail_count_is_clamped_to_name_length():
    assert tail_count(2, 1, 0.8) == 2


@pytest.mark.parametrize(
    "tail, head",
    [
        ("Charmander", "Pikachu"),
        ("Mr. Mime", "Jigglypuff"),
        ("Otto", "Kita"),
        ("123", "Ash"),
        ("Eevee", "A"),
    ],
)
def test_combine_respects_length_bound(tail, head):
    for secondary in (False, True):
        result = combine(tail, head, secondary)
        assert result
        assert len(result) <= len(fix_name(tail)) + len(fix_name(head))
