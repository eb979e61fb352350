from inline_dice.windowing import create_windows, window_from_range, windows_from_ranges


def test_create_windows_overlaps_correctly():
    text = "abcdefghij"
    windows = create_windows(text, window_size=4, stride=3)

    assert [(w.start, w.end) for w in windows] == [(0, 4), (3, 7), (6, 10)]
    assert windows[1].text == "defg"
    assert windows[-1].end == len(text)


def test_create_windows_whole_document_when_unsized():
    windows = create_windows("one 1d6 two", window_size=0, stride=0)
    assert len(windows) == 1
    assert windows[0].text == "one 1d6 two"
    assert create_windows("", window_size=4, stride=2) == []


def test_window_ranges_are_clamped_and_sorted():
    text = "0123456789"
    assert window_from_range(text, 8, 50).text == "89"
    windows = windows_from_ranges(text, [(6, 8), (-3, 2)])
    assert [(w.start, w.end) for w in windows] == [(0, 2), (6, 8)]
