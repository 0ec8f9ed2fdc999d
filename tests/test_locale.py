import pytest

from ebiscan.errors import InvalidArgumentsError
from ebiscan.locale import (
    ExecutionRecommendation,
    OutputLanguage,
    RiskLevel,
    SecurityRelevance,
    detect_system_locale,
    format_analysis_summary,
    format_code_vulnerability_analysis,
    format_injection_detection,
    format_overall_risk_assessment,
    format_static_analysis_summary,
    get_critical_warning,
    get_execution_guidance,
    get_prompt_message,
    get_prompt_text,
    get_risk_explanation,
    get_system_locale_info,
    parse_locale,
)

EN = OutputLanguage.ENGLISH
JA = OutputLanguage.JAPANESE


@pytest.fixture
def clean_env(monkeypatch):
    for var in ("LC_ALL", "LC_MESSAGES", "LANG", "LANGUAGE"):
        monkeypatch.delenv(var, raising=False)
    return monkeypatch


@pytest.mark.parametrize(
    "locale", ["ja_JP.UTF-8", "ja_JP", "ja", "Japanese_Japan.932", "japanese"]
)
def test_parse_locale_japanese(locale):
    assert parse_locale(locale) is JA


@pytest.mark.parametrize(
    "locale",
    ["en_US.UTF-8", "en_US", "en", "English_United States.1252", "english", "C.UTF-8", "POSIX"],
)
def test_parse_locale_english(locale):
    assert parse_locale(locale) is EN


@pytest.mark.parametrize("locale", ["fr_FR.UTF-8", "de_DE", "zh_CN", ""])
def test_parse_locale_unknown(locale):
    assert parse_locale(locale) is None


def test_detect_system_locale_with_env(clean_env):
    clean_env.setenv("LANG", "ja_JP.UTF-8")
    assert detect_system_locale() is JA
    clean_env.setenv("LANG", "en_US.UTF-8")
    assert detect_system_locale() is EN
    clean_env.setenv("LANG", "fr_FR.UTF-8")
    assert detect_system_locale() is EN


def test_locale_priority(clean_env):
    clean_env.setenv("LANG", "en_US.UTF-8")
    clean_env.setenv("LC_ALL", "ja_JP.UTF-8")
    assert detect_system_locale() is JA


def test_unrecognised_variable_falls_through(clean_env):
    clean_env.setenv("LC_ALL", "fr_FR.UTF-8")
    clean_env.setenv("LANGUAGE", "ja")
    assert detect_system_locale() is JA


def test_get_system_locale_info(clean_env):
    clean_env.setenv("LANG", "en_US.UTF-8")
    info = get_system_locale_info()
    assert "LANG=en_US.UTF-8" in info
    assert "LC_ALL=(not set)" in info


def test_output_language_parse():
    assert OutputLanguage.parse("japanese") is JA
    assert OutputLanguage.parse("english") is EN
    with pytest.raises(InvalidArgumentsError):
        OutputLanguage.parse("invalid")


@pytest.mark.parametrize(
    "risk, expected",
    [
        (RiskLevel.CRITICAL, ExecutionRecommendation.BLOCKED),
        (RiskLevel.HIGH, ExecutionRecommendation.DANGEROUS),
        (RiskLevel.MEDIUM, ExecutionRecommendation.CAUTION),
        (RiskLevel.LOW, ExecutionRecommendation.SAFE),
        (RiskLevel.INFO, ExecutionRecommendation.SAFE),
        (RiskLevel.NONE, ExecutionRecommendation.SAFE),
    ],
)
def test_execution_guidance_recommendation(risk, expected):
    for language in OutputLanguage:
        recommendation, advice = get_execution_guidance(risk, language)
        assert recommendation is expected
        assert advice


def test_execution_guidance_english_text():
    _, advice = get_execution_guidance(RiskLevel.CRITICAL, EN)
    assert advice.startswith("BLOCK EXECUTION")


def test_risk_explanation_differs_by_language():
    english = get_risk_explanation(SecurityRelevance.LOW, EN)
    japanese = get_risk_explanation(SecurityRelevance.LOW, JA)
    assert english == "Contains only standard operations with minimal security impact"
    assert japanese != english


def test_prompt_text_generation():
    assert "HIGH RISK" in get_prompt_text(RiskLevel.HIGH, EN)
    assert "proceed with execution" in get_prompt_text(RiskLevel.MEDIUM, EN)
    assert "yes" in get_prompt_text(RiskLevel.LOW, EN)


def test_prompt_message_and_warning():
    assert "CRITICAL RISK DETECTED" in get_prompt_message(RiskLevel.CRITICAL, EN)
    assert get_prompt_message(RiskLevel.NONE, EN) == get_prompt_message(RiskLevel.LOW, EN)
    assert get_critical_warning(EN).startswith("🚨 CRITICAL WARNING")


def test_static_summary_none_without_findings():
    assert format_static_analysis_summary(0, 0, EN) is None
    summary = format_static_analysis_summary(2, 3, EN)
    assert summary.startswith("Static analysis found 2 critical")


def test_analysis_summary_includes_counts():
    summary = format_analysis_summary("bash", 5, 100, EN)
    assert "bash" in summary and "5 lines" in summary and "100 bytes" in summary
    assert "bash" in format_analysis_summary("bash", 5, 100, JA)


def test_confidence_formatting():
    assert "90%" in format_code_vulnerability_analysis("high", 0.9, EN)
    assert "90%" in format_injection_detection("high", 0.9, JA)


def test_overall_risk_assessment():
    assert format_overall_risk_assessment("high", EN).startswith("Overall risk assessment")
    assert format_overall_risk_assessment("high", JA).endswith("high")