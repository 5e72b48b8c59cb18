import pytest

from debtoolkit.pages import drag_target_page, page_names, paginate


def test_paginate_keeps_order_and_items():
    items = list(range(60))
    pages = paginate(items, 28, 256)
    assert [x for page in pages for x in page] == items
    assert all(len(page) <= 28 for page in pages)


def test_paginate_respects_limit():
    pages = paginate(list(range(300)), 28, 256)
    assert sum(len(p) for p in pages) == 256
    assert pages[-1][-1] == 255


def test_paginate_exact_multiple_adds_empty_page():
    pages = paginate(list(range(56)), 28, 256)
    assert len(pages) == 3
    assert pages[-1] == []


def test_paginate_empty_gives_one_empty_page():
    assert paginate([], 28, 256) == [[]]


@pytest.mark.parametrize("count", [0, 1, 27, 28, 29, 100])
def test_page_names_match_paginate(count):
    names = page_names(count, 28)
    pages = paginate(list(range(count)), 28, 256)
    assert len(names) == len(pages)
    assert names[0] == "1"
    assert names == [str(i + 1) for i in range(len(names))]


def test_invalid_arguments():
    with pytest.raises(ValueError):
        paginate([1], 0, 10)
    with pytest.raises(ValueError):
        paginate([1], 5, -1)
    with pytest.raises(ValueError):
        page_names(-1, 28)


def test_drag_near_left_goes_back():
    assert drag_target_page("3", 10, 800, 40) == "2"


def test_drag_near_right_goes_forward():
    assert drag_target_page("3", 790, 800, 40) == "4"


def test_drag_in_middle_stays():
    assert drag_target_page("3", 400, 800, 40) is None


def test_drag_without_current_page():
    assert drag_target_page(None, 10, 800, 40) is None


def test_drag_left_of_first_page_has_no_target():
    assert drag_target_page("1", 5, 800, 40) is None


def test_drag_non_numeric_name_reads_as_zero():
    assert drag_target_page("abc", 790, 800, 40) == "1"