import pytest

from hybrid_summarizer.anonymization.models import AnonymizationResult, Artifact


class TestArtifact:
    def test_stores_type_original_replacement(self) -> None:
        artifact = Artifact(type="PHONE", original="555-0147", replacement="[PHONE_1]")
        assert artifact.type == "PHONE"
        assert artifact.original == "555-0147"
        assert artifact.replacement == "[PHONE_1]"

    def test_is_frozen(self) -> None:
        artifact = Artifact(type="PHONE", original="555-0147", replacement="[PHONE_1]")
        with pytest.raises(AttributeError):
            artifact.type = "EMAIL"  # type: ignore[misc]


class TestAnonymizationResult:
    def test_default_artifacts_is_empty_list(self) -> None:
        result = AnonymizationResult(anonymized_text="text")
        assert result.artifacts == []
        assert result.placeholder_map == {}

    def test_placeholder_map_keeps_replacement_order(self) -> None:
        result = AnonymizationResult(
            anonymized_text="[EMAIL_2] [PHONE_1]",
            artifacts=[
                Artifact(type="PHONE", original="555-0147", replacement="[PHONE_1]"),
                Artifact(type="EMAIL", original="a@b.com", replacement="[EMAIL_2]"),
            ],
        )
        assert list(result.placeholder_map.items()) == [
            ("[PHONE_1]", "555-0147"),
            ("[EMAIL_2]", "a@b.com"),
        ]

    def test_artifacts_default_not_shared_between_instances(self) -> None:
        r1 = AnonymizationResult(anonymized_text="a")
        r2 = AnonymizationResult(anonymized_text="b")
        r1.artifacts.append(Artifact(type="SSN", original="X", replacement="[SSN_1]"))
        assert r2.artifacts == []
