from hyperfind.models import AppEntry, AppItem, HeaderItem, UsageEntry, ViewState
from hyperfind.view_model import (
    ViewModel,
    build_view_items,
    ensure_visible,
    label_text,
    move_selection,
    visible_indices,
)


def _entries(n, prefix="App"):
    return [AppItem(AppEntry(key=f"{prefix}{i}", display_name=f"{prefix} {i:02d}")) for i in range(n)]


def _app_names(items):
    return [i.app.display_name for i in items if isinstance(i, AppItem)]


def test_query_mode_has_no_headers(make_apps) -> None:
    apps = make_apps("Files", "Firefox", "GIMP")
    items = build_view_items(apps, "fi", {})
    assert all(isinstance(i, AppItem) for i in items)
    assert _app_names(items) == ["Files", "Firefox"]


def test_idle_without_history_lists_all_apps(make_apps) -> None:
    apps = make_apps("Alpha", "Beta", "Gamma")
    items = build_view_items(apps, "", {})
    assert items[0] == HeaderItem("All Apps")
    assert _app_names(items) == ["Alpha", "Beta", "Gamma"]


def test_idle_sections_cover_catalog_exactly_once(make_apps) -> None:
    names = [f"App {c}" for c in "ABCDEFGHIJ"]
    apps = make_apps(*names)
    usage = {app.key: UsageEntry(count=i + 1, last_used=0) for i, app in enumerate(apps[:7])}

    items = build_view_items(apps, "", usage)

    assert items[0] == HeaderItem("Frequently Used")
    all_apps_at = items.index(HeaderItem("All Apps"))
    frequent = items[1:all_apps_at]
    rest = items[all_apps_at + 1:]

    assert len(frequent) == 5
    assert _app_names(frequent) == ["App G", "App F", "App E", "App D", "App C"]
    assert all(usage.get(i.app.key) for i in frequent)
    assert _app_names(rest) == ["App A", "App B", "App H", "App I", "App J"]
    assert sorted(_app_names(frequent) + _app_names(rest)) == sorted(names)


def test_ensure_visible_scrolls_to_bottom_of_long_list() -> None:
    state = ViewState(items=_entries(25), offset=0, selected_index=24)
    ensure_visible(state)
    assert state.offset == 15
    assert visible_indices(state.items, state.offset) == list(range(15, 25))


def test_ensure_visible_scrolls_up_to_selection() -> None:
    state = ViewState(items=_entries(25), offset=12, selected_index=3)
    ensure_visible(state)
    assert state.offset == 3


def test_ensure_visible_short_list_resets_offset() -> None:
    state = ViewState(items=_entries(8), offset=4, selected_index=7)
    ensure_visible(state)
    assert state.offset == 0

    empty = ViewState(items=[], offset=3, selected_index=None)
    ensure_visible(empty)
    assert empty.offset == 0


def test_ensure_visible_does_not_count_headers() -> None:
    items = [HeaderItem("Frequently Used")] + _entries(5, "F") + [HeaderItem("All Apps")] + _entries(10, "B")
    state = ViewState(items=items, offset=0, selected_index=12)
    ensure_visible(state)
    assert state.offset == 2
    shown = visible_indices(items, state.offset)
    assert 12 in shown
    assert sum(isinstance(items[i], AppItem) for i in shown) == 10


def test_visible_slice_excludes_header_after_tenth_entry() -> None:
    items = _entries(10) + [HeaderItem("All Apps")] + _entries(3, "B")
    assert visible_indices(items, 0) == list(range(10))


def test_move_selection_skips_headers_without_wrapping() -> None:
    a, b, c = _entries(3)
    items = [HeaderItem("One"), a, b, HeaderItem("Two"), c]
    state = ViewState(items=items, offset=0, selected_index=1)

    assert move_selection(state, 1)
    assert state.selected_index == 2
    assert move_selection(state, 1)
    assert state.selected_index == 4
    assert not move_selection(state, 1)
    assert state.selected_index == 4

    assert move_selection(state, -1)
    assert state.selected_index == 2
    assert move_selection(state, -1)
    assert state.selected_index == 1
    assert not move_selection(state, -1)
    assert state.selected_index == 1
    assert state.offset == 0


def test_move_selection_without_selection_picks_first_entry() -> None:
    items = [HeaderItem("All Apps")] + _entries(2)
    state = ViewState(items=items, offset=0, selected_index=None)
    assert move_selection(state, -1)
    assert state.selected_index == 1


def test_view_model_update_resets_state_and_maps_rows(make_apps) -> None:
    apps = make_apps(*[f"App {i:02d}" for i in range(15)])
    vm = ViewModel(apps, {})
    vm.update("")

    assert vm.state.offset == 0
    assert vm.state.selected_index == 1
    assert vm.selected_row() == 1
    assert vm.app_at_row(0) is None
    assert vm.app_at_row(1).display_name == "App 00"
    assert vm.app_at_row(99) is None

    for _ in range(12):
        vm.move(1)
    assert vm.selected_app().display_name == "App 12"
    assert vm.state.offset > 0
    assert vm.app_at_row(vm.selected_row()).display_name == "App 12"

    vm.update("app 1")
    assert vm.state.offset == 0
    assert vm.state.selected_index == 0
    assert vm.first_visible_app() is vm.selected_app()


def test_view_model_with_no_matches(make_apps) -> None:
    vm = ViewModel(make_apps("Files"), {})
    vm.update("zzzzzz")
    assert vm.state.items == []
    assert vm.state.selected_index is None
    assert vm.selected_app() is None
    assert vm.first_visible_app() is None
    assert not vm.move(1)


def test_label_text_shows_usage_only_when_enabled() -> None:
    app = AppEntry(key="files.desktop", display_name="Files")
    usage = {"files.desktop": UsageEntry(count=3, last_used=1)}
    assert label_text(app, usage) == "Files"
    assert label_text(app, usage, show_usage=True) == "Files  (3 uses)"
    assert label_text(app, {}, show_usage=True) == "Files  (0 uses)"


def test_select_row_follows_clicked_entry(make_apps) -> None:
    vm = ViewModel(make_apps("Alpha", "Beta", "Gamma"), {})
    vm.update("")

    assert vm.select_row(3)
    assert vm.selected_app().display_name == "Gamma"
    assert vm.selected_row() == 3

    assert vm.move(-1)
    assert vm.selected_app().display_name == "Beta"


def test_select_row_ignores_headers_and_out_of_range(make_apps) -> None:
    vm = ViewModel(make_apps("Alpha", "Beta"), {})
    vm.update("")

    assert not vm.select_row(0)
    assert not vm.select_row(7)
    assert not vm.select_row(-1)
    assert vm.selected_app().display_name == "Alpha"


def test_select_row_maps_through_scroll_offset(make_apps) -> None:
    vm = ViewModel(make_apps(*[f"App {i:02d}" for i in range(20)]), {})
    vm.update("")
    for _ in range(14):
        vm.move(1)
    offset = vm.state.offset
    assert offset > 0

    assert vm.select_row(2)
    assert vm.state.selected_index == offset + 2
    assert vm.state.offset == offset
    assert vm.selected_app() is vm.app_at_row(2)
