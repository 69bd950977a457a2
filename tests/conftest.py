import pytest


SAMPLE_GUIDE = """
onboarding:
  page_header: Acme Onboarding
  page_title: Welcome to Acme
  organization:
    checklists:
      - title: First Day
        tasks:
          - task: Collect your badge
          - task: Read the handbook
            link: https://wiki.acme.test/handbook
    access:
      - item: Email
        link: https://mail.acme.test
      - item: Slack
    internal_sites:
      - item: Wiki
        link: https://wiki.acme.test
  projects:
    - name: Billing
      checklists:
        - title: Setup
          tasks:
            - task: Clone the repo
              link: https://git.acme.test/billing
      access:
        - item: Stripe dashboard
    - name: Search
  roles:
    - role: Engineer
      access:
        - item: VPN
          link: https://vpn.acme.test
    - role: Designer
      checklists:
        - title: Tools
          tasks:
            - task: Install Figma
"""


@pytest.fixture
def sample_guide() -> str:
    return SAMPLE_GUIDE


@pytest.fixture
def guide_file(tmp_path, sample_guide):
    path = tmp_path / "onboarding.yml"
    path.write_text(sample_guide, encoding="utf-8")
    return path
