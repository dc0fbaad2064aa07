from careerprobe.ats.indicators import is_likely_careers_page, score_indicators
from careerprobe.ats.models import IndicatorTally
from careerprobe.ats.vendors import ATSVendor


def test_score_counts_each_keyword_once():
    html = '<div id="grnhse_app"></div>' * 10 + '<div data-gh-board="acme"></div>'
    tally = score_indicators(html)
    # grnhse, gh-, data-gh
    assert tally == IndicatorTally(greenhouse=3)


def test_score_is_case_insensitive_and_per_vendor():
    html = """
        <a href="https://JOBS.LEVER.CO/acme">Jobs</a>
        <script src="https://jobs.ashbyhq.com/acme/embed"></script>
        <a href="https://acme.wd5.myworkdayjobs.com/Careers">Workday</a>
    """
    tally = score_indicators(html)
    assert tally.lever == 2  # lever.co, jobs.lever
    assert tally.ashby == 2  # ashbyhq, jobs.ashbyhq
    assert tally.workday == 2  # myworkdayjobs, wd5.
    assert tally.greenhouse == 0
    assert tally.count_for(ATSVendor.LEVER) == 2
    assert tally.count_for(ATSVendor.SNAP) == 0


def test_score_empty_page():
    assert score_indicators("").is_empty
    assert score_indicators(None).is_empty
    assert not IndicatorTally(workday=1).is_empty


def test_careers_page_from_url():
    assert is_likely_careers_page("https://acme.com/Careers", "")
    assert is_likely_careers_page("https://acme.com/join-us", "")
    assert is_likely_careers_page("https://jobs.acme.com/", "")


def test_careers_page_from_content():
    assert is_likely_careers_page("https://acme.com/", "<h1>We're Hiring!</h1>")
    assert is_likely_careers_page("https://acme.com/", "<a>View all jobs</a>")


def test_not_careers_page():
    assert not is_likely_careers_page("https://acme.com/about", "<h1>About us</h1>")
