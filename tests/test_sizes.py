from imgcrawl.sizes import SizeCategory, categorize


def test_size_category_boundaries():
    assert categorize(0) is SizeCategory.SMALL
    assert categorize(102399) is SizeCategory.SMALL
    assert categorize(102400) is SizeCategory.MEDIUM
    assert categorize(1048575) is SizeCategory.MEDIUM
    assert categorize(1048576) is SizeCategory.LARGE
    assert categorize(50 * 1024 * 1024) is SizeCategory.LARGE


def test_size_category_values_are_directory_names():
    assert [c.value for c in SizeCategory] == ["small", "medium", "large"]
