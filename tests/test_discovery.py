import json

import pytest

from TemplateScout.Business.DiscoveryBusiness import (
    DiscoveryBusiness,
    SEARCH_QUERIES,
    TRENDING_QUERY,
    TemplateAccumulator,
    write_snapshot,
    read_snapshot,
)
from TemplateScout.Business.RepoAnalyzer import RepoAnalyzer
from TemplateScout.Model.TemplateAnalysis import TemplateAnalysis
from TemplateScout.Utility.config import DiscoveryConfig


class FakeClient:
    """Serves canned search results; analysis is stubbed separately."""
    def __init__(self, results=None):
        self.results = results or {}
        self.searches = []

    def search_repositories(self, query, sort="stars", order=None, per_page=30):
        self.searches.append((query, sort, order, per_page))
        return self.results.get(query, [])


def repo(name, stars):
    return {"owner": {"login": "acme"}, "name": name, "stargazers_count": stars}


def analysis_for(repo_summary):
    return TemplateAnalysis(
        name=repo_summary["name"],
        owner=repo_summary["owner"]["login"],
        stars=repo_summary["stargazers_count"],
    )


@pytest.fixture
def analyzed(monkeypatch):
    calls = []

    def fake_analyze(repo_summary, client):
        calls.append(repo_summary["name"])
        if repo_summary["name"].startswith("skip"):
            return None
        return analysis_for(repo_summary)

    monkeypatch.setattr(RepoAnalyzer, "analyze_repository", staticmethod(fake_analyze))
    return calls


def test_search_calls(analyzed):
    client = FakeClient()
    DiscoveryBusiness(DiscoveryConfig(), client=client).DiscoverTemplates()
    assert [s[0] for s in client.searches] == SEARCH_QUERIES + [TRENDING_QUERY]
    assert client.searches[0] == (SEARCH_QUERIES[0], "stars", None, 50)
    assert client.searches[-1] == (TRENDING_QUERY, "stars", "desc", 20)


def test_min_stars_applies_to_keyword_queries_only(analyzed):
    client = FakeClient({
        SEARCH_QUERIES[0]: [repo("popular", 150), repo("small", 50)],
        TRENDING_QUERY: [repo("fresh", 60)],
    })
    templates = DiscoveryBusiness(DiscoveryConfig(min_stars=100), client=client).DiscoverTemplates()
    assert [t.name for t in templates] == ["popular", "fresh"]


def test_null_analysis_is_skipped(analyzed):
    client = FakeClient({SEARCH_QUERIES[1]: [repo("skip-me", 500), repo("keep", 500)]})
    templates = DiscoveryBusiness(DiscoveryConfig(), client=client).DiscoverTemplates()
    assert [t.name for t in templates] == ["keep"]


def test_cap_stops_analysis(analyzed):
    results = {query: [repo(f"{i}-{n}", 200) for n in range(5)] for i, query in enumerate(SEARCH_QUERIES)}
    results[TRENDING_QUERY] = [repo("trend", 900)]
    client = FakeClient(results)
    templates = DiscoveryBusiness(DiscoveryConfig(max_templates=3), client=client).DiscoverTemplates()
    assert len(templates) == 3
    assert analyzed == ["0-0", "0-1", "0-2"]
    # remaining queries are still issued
    assert len(client.searches) == 5


def test_identical_records_are_deduplicated(analyzed):
    client = FakeClient({
        SEARCH_QUERIES[0]: [repo("same", 200)],
        SEARCH_QUERIES[2]: [repo("same", 200)],
        SEARCH_QUERIES[3]: [repo("same", 201)],
    })
    templates = DiscoveryBusiness(DiscoveryConfig(), client=client).DiscoverTemplates()
    # a changed star count makes a distinct record
    assert [(t.name, t.stars) for t in templates] == [("same", 200), ("same", 201)]


def test_accumulator_orders_by_insertion():
    acc = TemplateAccumulator()
    b = TemplateAnalysis(name="b", owner="o", stars=1)
    a = TemplateAnalysis(name="a", owner="o", stars=1)
    assert acc.add(b) is True
    assert acc.add(a) is True
    assert acc.add(TemplateAnalysis(name="b", owner="o", stars=1)) is False
    assert len(acc) == 2
    assert [t.name for t in acc.to_list()] == ["b", "a"]


def test_search_failure_propagates(analyzed):
    class FailingClient(FakeClient):
        def search_repositories(self, *args, **kwargs):
            raise RuntimeError("boom")

    with pytest.raises(RuntimeError):
        DiscoveryBusiness(DiscoveryConfig(), client=FailingClient()).DiscoverTemplates()


def test_snapshot_format(tmp_path):
    path = tmp_path / "template-analysis.json"
    templates = [TemplateAnalysis(
        name="nextapp",
        owner="acme",
        stars=150,
        dev_dependencies={"tailwindcss": "^3.0.0"},
        has_typescript=True,
        has_tailwind="^3.0.0",
        description="Démarrage rapide",
    )]
    write_snapshot(templates, str(path))
    text = path.read_text(encoding="utf-8")
    assert text.startswith('[\n  {\n    "name": "nextapp",')
    assert "Démarrage rapide" in text
    assert not text.endswith("\n")
    data = json.loads(text)
    # no push date or license on this record, so those keys are left out
    assert data[0]["description"] == "Démarrage rapide"
    assert list(data[0].keys()) == [
        "name", "owner", "stars", "description", "dependencies", "devDependencies",
        "hasTypescript", "hasTests", "hasTailwind", "topics",
    ]
    assert read_snapshot(str(path)) == templates


def test_repeated_runs_write_identical_files(tmp_path, analyzed):
    results = {
        SEARCH_QUERIES[0]: [repo("one", 300), repo("two", 250)],
        TRENDING_QUERY: [repo("three", 800)],
    }
    outputs = []
    for run in range(2):
        path = tmp_path / f"run-{run}.json"
        templates = DiscoveryBusiness(DiscoveryConfig(), client=FakeClient(results)).DiscoverTemplates()
        write_snapshot(templates, str(path))
        outputs.append(path.read_bytes())
    assert outputs[0] == outputs[1]


def test_low_star_template_excluded_end_to_end(monkeypatch, tmp_path):
    import base64

    class EndToEndClient(FakeClient):
        def list_contents(self, owner, name, path=""):
            return [{"name": "next.config.js"}, {"name": "package.json"}, {"name": "tsconfig.json"}]

        def get_file_content(self, owner, name, path):
            raw = json.dumps({"devDependencies": {"tailwindcss": "^3.0.0"}}).encode()
            return {"content": base64.b64encode(raw).decode()}

    summary = {"owner": {"login": "acme"}, "name": "nextapp", "stargazers_count": 50, "topics": []}
    client = EndToEndClient({SEARCH_QUERIES[0]: [summary]})
    monkeypatch.setenv("MIN_STARS", "100")
    config = DiscoveryConfig.from_env()
    config.output_path = str(tmp_path / "template-analysis.json")

    assert RepoAnalyzer.analyze_repository(summary, client) is not None
    templates = DiscoveryBusiness(config, client=client).DiscoverTemplates()
    write_snapshot(templates, config.output_path)
    assert json.loads((tmp_path / "template-analysis.json").read_text()) == []

