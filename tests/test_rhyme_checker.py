from freestyle_judge.core.rhyme import compare_vowels, score_rhyme


def test_single_verse_cannot_be_compared():
    result = score_rhyme("こんにちは")

    assert result.score == 0
    assert "not enough verses" in result.detail.lower()


def test_short_verses_are_discarded():
    assert score_rhyme("あ、い、う").score == 0


def test_identical_endings_score_full():
    result = score_rhyme("トマトトマト\nトマトトマト")

    assert result.score == 100
    assert "Excellent" in result.detail


def test_partial_match_reports_average_and_tier():
    result = score_rhyme("アイウエオ、アイウエカ")

    assert result.score == 80
    assert "80%" in result.detail
    assert "Good rhyme" in result.detail


def test_verses_without_kana_have_no_comparable_pairs():
    result = score_rhyme("ABCDE、FGHIJ")

    assert result.score == 0
    assert "no comparable vowel pairs" in result.detail.lower()


def test_only_the_last_five_characters_are_compared():
    # Different openings, identical endings.
    assert score_rhyme("カキクケコアイウエオ。サシスセソアイウエオ").score == 100


def test_mixed_script_verses_use_kana_endings():
    # 司を食べる -> OEU, 幸を味わう -> OAU
    result = score_rhyme("赤身、トロ、寿司を食べる、海の幸を味わう")
    assert result.score == 67


def test_compare_vowels_identical_readings():
    comparison = compare_vowels("キングオブヘッド", "きんぐおぶへっど")

    assert comparison.vowels_a == comparison.vowels_b == "INUOUEO"
    assert comparison.distance == 0
    assert comparison.similarity == 100


def test_compare_vowels_empty_readings():
    comparison = compare_vowels("", "")

    assert comparison.vowels_a == ""
    assert comparison.similarity == 100
