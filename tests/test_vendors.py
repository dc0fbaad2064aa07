import pytest

from careerprobe.ats.vendors import ATSVendor, is_workday_url, match_vendor, vendor_from_url


@pytest.mark.parametrize(
    "url,expected",
    [
        ("https://careers.microsoft.com/us/en/job/12345", ATSVendor.MICROSOFT),
        ("HTTPS://CAREERS.MICROSOFT.COM/JOB/ABC", ATSVendor.MICROSOFT),
        ("https://careers.tiktok.com/position/123", ATSVendor.TIKTOK),
        ("https://lifeattiktok.com/job/456", ATSVendor.TIKTOK),
        ("https://jobs.apple.com/en-us/details/200000", ATSVendor.APPLE),
        ("https://careers.snap.com/jobs/123", ATSVendor.SNAP),
        ("https://snap.com/careers/positions/456", ATSVendor.SNAP),
        ("https://boards.greenhouse.io/acme", ATSVendor.GREENHOUSE),
        ("https://apply.workable.com/acme/", ATSVendor.WORKABLE),
        ("https://jobs.jobvite.com/acme", ATSVendor.JOBVITE),
        ("https://jobs.lever.co/acme", ATSVendor.LEVER),
        ("https://acme.bamboohr.com/careers", ATSVendor.BAMBOOHR),
        ("https://jobs.smartrecruiters.com/Acme", ATSVendor.SMARTRECRUITERS),
        ("https://jobs.ashbyhq.com/acme", ATSVendor.ASHBY),
        ("https://acme.applytojob.jazz.co/apply", ATSVendor.JAZZHR),
        ("https://acme.jazzhr.com/", ATSVendor.JAZZHR),
        ("https://acme.recruitee.com/", ATSVendor.RECRUITEE),
        ("https://acme.breezy.hr/p/123", ATSVendor.BREEZYHR),
    ],
)
def test_vendor_from_url(url, expected):
    assert vendor_from_url(url) == expected


def test_vendor_from_url_unknown():
    assert vendor_from_url("https://www.example.com/careers") is None
    assert vendor_from_url("") is None


def test_vendor_from_url_first_rule_wins():
    # greenhouse is checked before lever, workable before lever
    assert vendor_from_url("https://boards.greenhouse.io/acme?ref=jobs.lever.co") == ATSVendor.GREENHOUSE
    assert vendor_from_url("https://jobs.lever.co/acme?src=workable.com") == ATSVendor.WORKABLE


def test_workday_is_not_substring_matched():
    assert vendor_from_url("https://acme.wd1.myworkdayjobs.com/Careers") is None


@pytest.mark.parametrize(
    "url",
    [
        "https://company.wd1.myworkdayjobs.com/en-US/Careers/job/123",
        "https://example.wd5.myworkdayjobs.com/jobs",
        "http://testcompany.wd12.myworkdayjobs.com/Jobs",
    ],
)
def test_is_workday_url(url):
    assert is_workday_url(url)
    assert match_vendor(url) == ATSVendor.WORKDAY


@pytest.mark.parametrize(
    "url",
    [
        "https://company.myworkdayjobs.com/Careers",
        "https://company.wd.myworkdayjobs.com/Jobs",
        "https://workday.com/careers",
        "not a url",
    ],
)
def test_is_workday_url_rejects(url):
    assert not is_workday_url(url)


def test_match_vendor_prefers_pattern_table():
    assert match_vendor("https://jobs.lever.co/acme") == ATSVendor.LEVER
    assert match_vendor("https://www.example.com") is None


def test_vendor_properties():
    assert ATSVendor.BREEZYHR.display_name == "Breezy HR"
    assert str(ATSVendor.GREENHOUSE) == "greenhouse"
    assert ATSVendor("lever") is ATSVendor.LEVER
    assert [v for v in ATSVendor if v.is_probed] == [ATSVendor.GREENHOUSE, ATSVendor.LEVER, ATSVendor.ASHBY]
    assert ATSVendor.WORKDAY.is_supported
    assert not ATSVendor.JOBVITE.is_supported
