from task_viewer.filters.search import apply_filters, filter_by_status, filter_by_title
from task_viewer.models.task import task_title

from .fakes import make_task


def titles(tasks):
    return [task_title(t) for t in tasks]


def test_search_report_keeps_only_matching_title():
    tasks = [make_task("Write report", "Done"), make_task("Buy milk", "Done")]

    assert titles(apply_filters(tasks, "report")) == ["Write report"]


def test_search_is_case_insensitive_and_trimmed():
    tasks = [make_task("Write Report"), make_task("Buy milk")]

    assert titles(apply_filters(tasks, "  REPORT ")) == ["Write Report"]


def test_blank_search_and_no_status_keep_everything(sample_tasks):
    assert apply_filters(sample_tasks, "   ", "") == sample_tasks
    assert apply_filters(sample_tasks) == sample_tasks


def test_status_is_exact_match(sample_tasks):
    assert titles(apply_filters(sample_tasks, "", "Done")) == ["Write report"]
    assert apply_filters(sample_tasks, "", "done") == []
    assert apply_filters(sample_tasks, "", "Don") == []


def test_untitled_and_statusless_tasks_never_match_a_facet():
    tasks = [make_task(), make_task("Untitled Task draft")]

    assert titles(filter_by_title(tasks, "untitled")) == ["Untitled Task draft"]
    assert filter_by_status(tasks, "No Status") == []


def test_facets_commute(sample_tasks):
    sample_tasks = sample_tasks + [make_task("Report taxes", "Done"), make_task(None, "Done")]

    for search, status in [("report", "Done"), ("r", "In progress"), ("", "Done"), ("milk", "")]:
        title_first = filter_by_status(filter_by_title(sample_tasks, search), status)
        status_first = filter_by_title(filter_by_status(sample_tasks, status), search)

        assert title_first == status_first == apply_filters(sample_tasks, search, status)


def test_filter_is_idempotent_and_does_not_mutate(sample_tasks):
    before = list(sample_tasks)

    first = apply_filters(sample_tasks, "report", "")
    second = apply_filters(sample_tasks, "report", "")

    assert first == second
    assert apply_filters(first, "report", "") == first
    assert sample_tasks == before


def test_order_is_preserved(sample_tasks):
    assert titles(apply_filters(sample_tasks, "report")) == ["Write report", "Review report draft"]
