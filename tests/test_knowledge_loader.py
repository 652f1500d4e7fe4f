import os

import pytest

from learnpath.errors import NotFound, ValidationError
from learnpath.services.knowledge_loader import list_knowledge_points, load_knowledge_point

REPO_KNOWLEDGE_POINTS = os.path.join(os.path.dirname(__file__), "..", "knowledge_points")


def _write(directory, name, text):
    (directory / f"{name}.yaml").write_text(text, encoding="utf-8")


class TestLoadKnowledgePoint:

    def test_bundled_code_demo(self):
        kp = load_knowledge_point("python-list-comprehension", REPO_KNOWLEDGE_POINTS)
        assert kp.title == "List comprehensions"
        assert kp.demoConfig.type == "code"
        assert kp.demoConfig.content.initialCode
        assert len(kp.demoConfig.content.steps) == 3
        assert all(step.code for step in kp.demoConfig.content.steps)

    def test_bundled_visualization_demo(self):
        kp = load_knowledge_point("binary-search", REPO_KNOWLEDGE_POINTS)
        assert kp.demoConfig.type == "visualization"
        assert all(step.visualization for step in kp.demoConfig.content.steps)

    def test_without_demo(self, tmp_path):
        _write(tmp_path, "plain", "title: Plain\ntheory: Just text.\n")
        kp = load_knowledge_point("plain", str(tmp_path))
        assert kp.demoConfig is None
        assert kp.theory == "Just text."

    def test_missing_file(self, tmp_path):
        with pytest.raises(NotFound):
            load_knowledge_point("absent", str(tmp_path))

    def test_path_like_id_is_rejected(self, tmp_path):
        with pytest.raises(NotFound):
            load_knowledge_point("../secrets", str(tmp_path))

    def test_missing_title(self, tmp_path):
        _write(tmp_path, "broken", "theory: text\n")
        with pytest.raises(ValidationError):
            load_knowledge_point("broken", str(tmp_path))

    def test_step_payload_must_match_demo_type(self, tmp_path):
        _write(
            tmp_path,
            "mismatch",
            "title: T\ntheory: t\ndemo:\n  type: code\n  steps:\n"
            "    - description: d\n      visualization: v\n",
        )
        with pytest.raises(ValidationError):
            load_knowledge_point("mismatch", str(tmp_path))


class TestListKnowledgePoints:

    def test_lists_sorted_and_skips_broken(self, tmp_path):
        _write(tmp_path, "b", "title: Bee\ntheory: t\n")
        _write(tmp_path, "a", "title: Ay\ntheory: t\n")
        _write(tmp_path, "c", "theory: no title\n")
        summaries = list_knowledge_points(str(tmp_path))
        assert [(s.id, s.title) for s in summaries] == [("a", "Ay"), ("b", "Bee")]

    def test_missing_directory(self, tmp_path):
        assert list_knowledge_points(str(tmp_path / "nope")) == []
