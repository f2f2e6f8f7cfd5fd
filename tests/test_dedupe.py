from fusion_names.dedupe import erase_substring_duplicates, find_doubled_fragment, substring_candidates


def test_substring_candidates_are_sorted_and_unique():
    assert substring_candidates("aba") == ["a", "ab", "aba", "b", "ba"]
    assert substring_candidates("") == []


def test_erase_removes_smallest_fragment_in_sorted_order():
    assert erase_substring_duplicates("xbcbcaa", "bcaa", "x", "y") == "xbcbca"


def test_erase_skips_repetitions_found_in_source_names():
    assert find_doubled_fragment("xbcbcaa", "bcaa", "aa", "y") == ("bc", 3)
    assert erase_substring_duplicates("xbcbcaa", "bcaa", "aa", "y") == "xbcaa"


def test_erase_keeps_natural_double_letters():
    assert erase_substring_duplicates("Kitto", "to", "Kita", "Otto") == "Kitto"
    assert erase_substring_duplicates("Kitto", "to", "Kita", "Lato") == "Kito"


def test_erase_only_checks_first_occurrence():
    assert erase_substring_duplicates("abcbb", "b", "a", "c") == "abcbb"


def test_erase_without_duplicates_returns_original():
    assert erase_substring_duplicates("Pikacder", "der", "Pikachu", "Charmander") == "Pikacder"
    assert erase_substring_duplicates("AaB", "aB", "x", "y") == "AaB"
    assert erase_substring_duplicates("Eeve", "", "Eevee", "") == "Eeve"
