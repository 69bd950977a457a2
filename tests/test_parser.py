import pytest
from datetime import date

from easy_onboard.core import parse, parse_file, ParseError
from easy_onboard.models import Checklist, Organization


def test_parse_full_document(sample_guide):
    doc = parse(sample_guide)

    assert doc.page_header == "Acme Onboarding"
    assert doc.page_title == "Welcome to Acme"
    assert [p.name for p in doc.projects] == ["Billing", "Search"]
    assert [r.name for r in doc.roles] == ["Engineer", "Designer"]

    first_day = doc.organization.checklists[0]
    assert first_day.title == "First Day"
    assert [t.description for t in first_day.tasks] == ["Collect your badge", "Read the handbook"]
    assert first_day.tasks[0].link is None
    assert first_day.tasks[1].link == "https://wiki.acme.test/handbook"


def test_missing_optional_sections_are_empty(sample_guide):
    doc = parse(sample_guide)
    search = doc.projects[1]

    assert search.checklists == ()
    assert search.access == ()
    assert doc.roles[0].checklists == ()


def test_null_sequences_are_empty():
    doc = parse("onboarding:\n  projects:\n  roles:\n    - role: QA\n      access:\n")

    assert doc.projects == ()
    assert doc.roles[0].access == ()


def test_empty_organization_mapping():
    doc = parse("onboarding:\n  organization: {}\n")

    assert doc.organization == Organization()
    assert doc.organization.internal_sites == ()


def test_null_onboarding_is_empty_document():
    doc = parse("onboarding:\n")

    assert doc.is_empty
    assert doc.page_title is None


def test_unknown_keys_are_ignored():
    doc = parse(
        "onboarding:\n"
        "  theme: dark\n"
        "  projects:\n"
        "    - name: Billing\n"
        "      owner: alice\n"
    )

    assert doc.projects[0].name == "Billing"


def test_blank_link_is_absent():
    doc = parse("onboarding:\n  roles:\n    - role: Ops\n      access:\n        - item: Pager\n          link: ''\n")

    assert doc.roles[0].access[0].link is None
    assert not doc.roles[0].access[0].has_link


def test_numeric_names_become_text():
    doc = parse("onboarding:\n  projects:\n    - name: 2024\n")

    assert doc.projects[0].name == "2024"


def test_project_missing_name():
    raw = (
        "onboarding:\n"
        "  projects:\n"
        "    - name: Billing\n"
        "    - checklists:\n"
        "        - title: Setup\n"
        "      access:\n"
        "        - item: Repo\n"
    )

    with pytest.raises(ParseError) as exc_info:
        parse(raw)

    err = exc_info.value
    assert err.entity == "Project"
    assert err.field == "name"
    assert "Project missing 'name'" in str(err)
    assert "projects[1]" in str(err)


def test_task_missing_description_names_task_key():
    raw = "onboarding:\n  organization:\n    checklists:\n      - title: Day 1\n        tasks:\n          - link: https://x\n"

    with pytest.raises(ParseError) as exc_info:
        parse(raw)

    assert exc_info.value.entity == "Task"
    assert exc_info.value.field == "task"


def test_checklist_missing_title():
    with pytest.raises(ParseError) as exc_info:
        parse("onboarding:\n  roles:\n    - role: Ops\n      checklists:\n        - tasks: []\n")

    assert exc_info.value.entity == "Checklist"
    assert exc_info.value.field == "title"


def test_list_entry_that_is_not_a_mapping():
    with pytest.raises(ParseError) as exc_info:
        parse("onboarding:\n  projects:\n    - Billing\n")

    assert exc_info.value.entity == "Project"


@pytest.mark.parametrize("raw", [
    "onboarding: {projects: [",
    "onboarding:\n  projects:\n    - name: [unclosed\n",
    "",
    "just a string",
    "- onboarding\n",
    "welcome:\n  page_title: Hi\n",
    "onboarding: 42\n",
])
def test_malformed_text_raises(raw):
    with pytest.raises(ParseError):
        parse(raw)


def test_parse_file(guide_file):
    doc = parse_file(guide_file)

    assert doc.organization is not None


def test_parse_file_missing(tmp_path):
    with pytest.raises(FileNotFoundError):
        parse_file(tmp_path / "nope.yml")


def test_document_is_immutable(sample_guide):
    doc = parse(sample_guide)

    with pytest.raises(Exception):
        doc.page_title = "Changed"


def test_date_title_stays_as_written():
    doc = parse("onboarding:\n  organization:\n    checklists:\n      - title: 2024-09-01\n")

    assert doc.organization.checklists[0].title == "2024-09-01"


def test_date_values_become_iso_text():
    checklist = Checklist.model_validate({"title": date(2024, 9, 1)})

    assert checklist.title == "2024-09-01"


def test_yes_no_words_stay_as_written():
    raw = (
        "onboarding:\n"
        "  roles:\n"
        "    - role: on\n"
        "      access:\n"
        "        - item: yes\n"
        "      checklists:\n"
        "        - title: Day 1\n"
        "          tasks:\n"
        "            - task: No\n"
    )
    role = parse(raw).roles[0]

    assert role.name == "on"
    assert role.access[0].label == "yes"
    assert role.checklists[0].tasks[0].description == "No"


def test_attribute_names_are_not_accepted_as_keys():
    raw = "onboarding:\n  organization:\n    checklists:\n      - title: Day 1\n        tasks:\n          - description: Collect badge\n"

    with pytest.raises(ParseError) as exc_info:
        parse(raw)

    assert exc_info.value.entity == "Task"
    assert exc_info.value.field == "task"


def test_access_item_requires_item_key():
    with pytest.raises(ParseError) as exc_info:
        parse("onboarding:\n  roles:\n    - role: Ops\n      access:\n        - label: VPN\n")

    assert exc_info.value.entity == "AccessItem"
    assert exc_info.value.field == "item"
