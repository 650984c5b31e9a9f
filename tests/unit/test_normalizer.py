import json

from devgenie.generation.normalizer import (
    DEFAULT_CATEGORY,
    DEFAULT_ESTIMATED_TIME,
    extract_json,
    normalize_detail,
    normalize_projects,
    normalize_resources,
    strip_code_fences,
)
from devgenie.models.project import CATEGORY_LENGTH, ESTIMATED_TIME_LENGTH, TITLE_LENGTH
from devgenie.providers.base import ProviderResult

PROJECTS = [
    {
        "title": "Budget Buddy",
        "description": "Track spending",
        "difficulty": "beginner",
        "tags": ["React", "Chart.js"],
        "category": "Web Development",
        "estimatedTime": "3-4 weeks",
        "marketDemand": "High",
    },
    {"title": "Trip Planner", "description": "Plan trips", "tags": "Vue, Maps"},
]


def _reply(text, source="openai"):
    return ProviderResult.success(source, text)


class TestExtractJson:
    def test_bare_array(self):
        assert extract_json('[{"a": 1}]', "array") == [{"a": 1}]

    def test_fenced_array(self):
        text = "```json\n" + json.dumps(PROJECTS) + "\n```"
        assert extract_json(text, "array") == PROJECTS

    def test_array_surrounded_by_prose(self):
        text = "Here are some ideas:\n" + json.dumps(PROJECTS) + "\nGood luck!"
        assert extract_json(text, "array") == PROJECTS

    def test_object_inside_prose(self):
        text = 'Sure! {"structure": "MVC"} Hope it helps.'
        assert extract_json(text, "object") == {"structure": "MVC"}

    def test_list_inside_wrapper_object(self):
        text = json.dumps({"projects": PROJECTS})
        assert extract_json(text, "array") == PROJECTS

    def test_no_json_returns_none(self):
        assert extract_json("I would suggest building a todo app.", "array") is None

    def test_invalid_json_returns_none(self):
        assert extract_json("[{title: 'no quotes'}]", "array") is None

    def test_empty_text_returns_none(self):
        assert extract_json("", "object") is None

    def test_wrong_shape_returns_none(self):
        assert extract_json("[1, 2, 3]", "object") is None

    def test_strip_code_fences_leaves_unfenced_text(self):
        assert strip_code_fences("  plain  ") == "plain"
        assert strip_code_fences("```\n[1]\n```") == "[1]"


class TestNormalizeProjects:
    def test_maps_fields_and_tags_source(self):
        records = normalize_projects(_reply(json.dumps(PROJECTS), "gemini"))

        assert len(records) == 2
        first = records[0]
        assert first["title"] == "Budget Buddy"
        assert first["difficulty"] == "Beginner"
        assert first["estimated_time"] == "3-4 weeks"
        assert first["market_demand"] == "High"
        assert all(r["source_provider"] == "gemini" for r in records)

    def test_fills_defaults(self):
        records = normalize_projects(_reply(json.dumps(PROJECTS)), default_difficulty="Advanced")

        second = records[1]
        assert second["tags"] == ["Vue", "Maps"]
        assert second["difficulty"] == "Advanced"
        assert second["category"] == DEFAULT_CATEGORY
        assert second["estimated_time"] == DEFAULT_ESTIMATED_TIME
        assert second["market_demand"] == "Medium"

    def test_drops_entries_without_title(self):
        text = json.dumps([{"description": "nameless"}, "not an object", {"name": "Named"}])
        records = normalize_projects(_reply(text))
        assert [r["title"] for r in records] == ["Named"]

    def test_prose_reply_is_unparseable(self):
        assert normalize_projects(_reply("Build a chess engine, it is fun.")) is None


class TestNormalizeDetail:
    def test_maps_camel_case_fields(self):
        text = json.dumps(
            {
                "structure": "Frontend + API",
                "flow": ["Sign up", "Add expense"],
                "roadmap": "Week 1: setup",
                "pseudoCode": "function main() {}",
                "resources": ["https://react.dev/"],
                "githubLinks": [{"url": "https://github.com/topics/react"}],
            }
        )
        detail = normalize_detail(_reply(text, "claude"))

        assert detail["flow"] == "Sign up\nAdd expense"
        assert detail["pseudo_code"] == "function main() {}"
        assert detail["github_links"] == ["https://github.com/topics/react"]
        assert detail["source_provider"] == "claude"

    def test_repeated_links_are_dropped(self):
        text = json.dumps(
            {
                "structure": "CLI",
                "resources": ["https://docs.python.org/3/", "https://docs.python.org/3/"],
            }
        )
        assert normalize_detail(_reply(text))["resources"] == ["https://docs.python.org/3/"]

    def test_empty_object_is_rejected(self):
        assert normalize_detail(_reply('{"resources": []}')) is None

    def test_array_reply_is_rejected(self):
        assert normalize_detail(_reply("no object here")) is None


class TestNormalizeResources:
    def test_keeps_extra_fields_and_tags_source(self):
        text = json.dumps(
            [
                {
                    "title": "Fast.ai",
                    "url": "https://course.fast.ai",
                    "type": "Course",
                    "rating": "4.5/5",
                    "isFree": True,
                    "duration": "7 weeks",
                }
            ]
        )
        [resource] = normalize_resources(_reply(text, "openai"))

        assert resource["type"] == "course"
        assert resource["rating"] == 4.5
        assert resource["is_free"] is True
        assert resource["duration"] == "7 weeks"
        assert resource["source"] == "openai"
        assert "isFree" not in resource

    def test_unknown_type_defaults_to_tutorial(self):
        [resource] = normalize_resources(_reply('[{"title": "Blog", "type": "podcast"}]'))
        assert resource["type"] == "tutorial"
        assert resource["rating"] is None


class TestProjectFieldBounds:
    def test_oversized_fields_fit_their_columns(self):
        text = json.dumps(
            [
                {
                    "title": "T" * 300,
                    "category": "C" * 150,
                    "estimatedTime": "4-6 weeks depending on experience with the chosen stack",
                }
            ]
        )

        [record] = normalize_projects(_reply(text))

        assert len(record["title"]) == TITLE_LENGTH
        assert len(record["category"]) == CATEGORY_LENGTH
        assert len(record["estimated_time"]) <= ESTIMATED_TIME_LENGTH
        assert record["estimated_time"].startswith("4-6 weeks depending")
