"""System locale detection and localized analysis messages."""

from __future__ import annotations

import os
from enum import Enum

from .errors import InvalidArgumentsError

_LOCALE_VARS = ("LC_ALL", "LC_MESSAGES", "LANG", "LANGUAGE")


class OutputLanguage(str, Enum):
    """Language used for reports and prompts."""

    ENGLISH = "english"
    JAPANESE = "japanese"

    @classmethod
    def parse(cls, text: str) -> "OutputLanguage":
        """Parse a language name; raise InvalidArgumentsError if unsupported."""
        aliases = {
            "english": cls.ENGLISH,
            "en": cls.ENGLISH,
            "japanese": cls.JAPANESE,
            "ja": cls.JAPANESE,
        }
        try:
            return aliases[text.strip().lower()]
        except KeyError:
            raise InvalidArgumentsError(
                f"Unsupported output language: {text} (expected english or japanese)"
            ) from None


class RiskLevel(str, Enum):
    """Overall risk assigned to a script."""

    NONE = "none"
    INFO = "info"
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    CRITICAL = "critical"


class ExecutionRecommendation(str, Enum):
    """What the analysis recommends doing with a script."""

    SAFE = "safe"
    CAUTION = "caution"
    DANGEROUS = "dangerous"
    BLOCKED = "blocked"

    @property
    def description(self) -> str:
        return _RECOMMENDATION_DESCRIPTIONS[self]


_RECOMMENDATION_DESCRIPTIONS = {
    ExecutionRecommendation.SAFE: "Low risk, likely safe to execute",
    ExecutionRecommendation.CAUTION: "Medium risk, review carefully before executing",
    ExecutionRecommendation.DANGEROUS: "High risk, execution not recommended",
    ExecutionRecommendation.BLOCKED: "Critical risk or analysis failure, execution blocked",
}


class SecurityRelevance(str, Enum):
    """Security weight of a single script construct."""

    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    CRITICAL = "critical"


_EN = OutputLanguage.ENGLISH
_JA = OutputLanguage.JAPANESE


def parse_locale(locale: str) -> OutputLanguage | None:
    """Map a locale string such as ``ja_JP.UTF-8`` to an output language."""
    lowered = locale.lower()

    if lowered.startswith("ja") or "japanese" in lowered or "japan" in lowered:
        return _JA

    if (
        lowered in ("c", "posix")
        or lowered.startswith(("c.", "c_", "c-"))
    ):
        return _EN

    if lowered.startswith("en") or any(
        word in lowered for word in ("english", "american", "british")
    ):
        return _EN

    return None


def detect_system_locale() -> OutputLanguage:
    """Detect the output language from the locale environment variables."""
    for var in _LOCALE_VARS:
        value = os.environ.get(var)
        if value is not None:
            language = parse_locale(value)
            if language is not None:
                return language
    return _EN


def get_system_locale_info() -> str:
    """Describe the locale environment variables for debug output."""
    return ", ".join(
        f"{var}={os.environ.get(var, '(not set)')}" for var in _LOCALE_VARS
    )


_RISK_EXPLANATIONS = {
    (SecurityRelevance.CRITICAL, _JA): "システムに深刻な損害を与える可能性、任意コードの実行、またはシステムセキュリティの侵害を引き起こす可能性のある操作を含みます",
    (SecurityRelevance.HIGH, _JA): "昇格した権限を必要とする操作、ネットワーク通信、またはシステム状態の変更を含みます",
    (SecurityRelevance.MEDIUM, _JA): "システムリソース、環境変数、またはファイルI/Oにアクセスする操作を含みます",
    (SecurityRelevance.LOW, _JA): "セキュリティへの影響が最小限の標準的な操作のみを含みます",
    (SecurityRelevance.CRITICAL, _EN): "Contains operations that could cause immediate system damage, execute arbitrary code, or compromise system security",
    (SecurityRelevance.HIGH, _EN): "Contains operations that require elevated privileges, perform network communication, or modify system state",
    (SecurityRelevance.MEDIUM, _EN): "Contains operations that access system resources, environment variables, or perform file I/O",
    (SecurityRelevance.LOW, _EN): "Contains only standard operations with minimal security impact",
}


def get_risk_explanation(relevance: SecurityRelevance, language: OutputLanguage) -> str:
    return _RISK_EXPLANATIONS[(relevance, language)]


_JA_MINIMAL = (
    ExecutionRecommendation.SAFE,
    "最小リスク: 重大なセキュリティ上の問題は特定されませんでした。このスクリプトは安全に実行できるようです。",
)
_EN_MINIMAL = (
    ExecutionRecommendation.SAFE,
    "MINIMAL RISK: No significant security concerns identified. This script appears safe to execute.",
)

_GUIDANCE = {
    (RiskLevel.CRITICAL, _JA): (
        ExecutionRecommendation.BLOCKED,
        "実行をブロック: このスクリプトには、システムに深刻な損害や侵害を引き起こす可能性のある重大なセキュリティリスクが含まれています。実行前に手動でのレビューが必要です。",
    ),
    (RiskLevel.HIGH, _JA): (
        ExecutionRecommendation.DANGEROUS,
        "注意が必要: このスクリプトには高リスクの操作が含まれています。特定された問題を慎重に確認し、より安全な代替手段を検討してください。ソースを信頼し、影響を理解している場合のみ実行してください。",
    ),
    (RiskLevel.MEDIUM, _JA): (
        ExecutionRecommendation.CAUTION,
        "レビュー推奨: このスクリプトはシステムリソースにアクセスする操作を実行します。分析結果を確認し、スクリプトが何を行うかを理解してください。",
    ),
    (RiskLevel.LOW, _JA): (
        ExecutionRecommendation.SAFE,
        "低リスク: このスクリプトはセキュリティへの影響が最小限の標準的な操作を実行するようです。標準的な予防措置を適用してください。",
    ),
    (RiskLevel.INFO, _JA): _JA_MINIMAL,
    (RiskLevel.NONE, _JA): _JA_MINIMAL,
    (RiskLevel.CRITICAL, _EN): (
        ExecutionRecommendation.BLOCKED,
        "BLOCK EXECUTION: This script contains critical security risks that could cause immediate system damage or compromise. Manual review required before execution.",
    ),
    (RiskLevel.HIGH, _EN): (
        ExecutionRecommendation.DANGEROUS,
        "CAUTION REQUIRED: This script contains high-risk operations. Carefully review the identified issues and consider safer alternatives. Execute only if you trust the source and understand the implications.",
    ),
    (RiskLevel.MEDIUM, _EN): (
        ExecutionRecommendation.CAUTION,
        "REVIEW RECOMMENDED: This script performs operations that access system resources. Review the analysis results and ensure you understand what the script will do.",
    ),
    (RiskLevel.LOW, _EN): (
        ExecutionRecommendation.SAFE,
        "LOW RISK: This script appears to perform standard operations with minimal security impact. Standard precautions apply.",
    ),
    (RiskLevel.INFO, _EN): _EN_MINIMAL,
    (RiskLevel.NONE, _EN): _EN_MINIMAL,
}


def get_execution_guidance(
    risk: RiskLevel, language: OutputLanguage
) -> tuple[ExecutionRecommendation, str]:
    """Return the recommendation and advice text for a risk level."""
    return _GUIDANCE[(risk, language)]


def format_analysis_summary(
    language_str: str, line_count: int, size_bytes: int, language: OutputLanguage
) -> str:
    if language is _JA:
        return f"{language_str}スクリプトを分析しました（{line_count}行、{size_bytes}バイト）"
    return f"Analyzed {language_str} script ({line_count} lines, {size_bytes} bytes)"


def format_static_analysis_summary(
    critical_nodes: int, high_risk_nodes: int, language: OutputLanguage
) -> str | None:
    """Summarise static findings, or return None when there are none."""
    if critical_nodes == 0 and high_risk_nodes == 0:
        return None
    if language is _JA:
        return (
            f"静的解析で{critical_nodes}個の重要な操作と"
            f"{high_risk_nodes}個の高リスク操作が見つかりました"
        )
    return (
        f"Static analysis found {critical_nodes} critical and "
        f"{high_risk_nodes} high-risk operations"
    )


def format_code_vulnerability_analysis(
    risk_level: str, confidence: float, language: OutputLanguage
) -> str:
    percent = f"{confidence * 100:.0f}"
    if language is _JA:
        return f"コード脆弱性分析: {risk_level}リスク（信頼度: {percent}%）"
    return f"Code vulnerability analysis: {risk_level} risk (confidence: {percent}%)"


def format_injection_detection(
    risk_level: str, confidence: float, language: OutputLanguage
) -> str:
    percent = f"{confidence * 100:.0f}"
    if language is _JA:
        return f"インジェクション検出: {risk_level}リスク（信頼度: {percent}%）"
    return f"Injection detection: {risk_level} risk (confidence: {percent}%)"


def format_overall_risk_assessment(risk_level: str, language: OutputLanguage) -> str:
    if language is _JA:
        return f"総合リスク評価: {risk_level}"
    return f"Overall risk assessment: {risk_level}"


_JA_LOW_PROMPT = "✅ 低リスクが検出されました\nこのスクリプトは比較的安全です。"
_EN_LOW_PROMPT = "✅ LOW RISK DETECTED\nThis script appears relatively safe."

_PROMPT_MESSAGES = {
    (RiskLevel.CRITICAL, _JA): "🚨 重大リスクが検出されました - 安全のため実行は自動的にブロックされます。",
    (RiskLevel.HIGH, _JA): (
        "⚠️  高リスクが検出されました\n"
        "このスクリプトは危険な操作を実行します。\n"
        "実行前に分析結果を慎重に確認してください。"
    ),
    (RiskLevel.MEDIUM, _JA): (
        "🔸 中リスクが検出されました\n"
        "このスクリプトはシステムリソースにアクセスします。\n"
        "実行前に分析結果を確認してください。"
    ),
    (RiskLevel.LOW, _JA): _JA_LOW_PROMPT,
    (RiskLevel.NONE, _JA): _JA_LOW_PROMPT,
    (RiskLevel.INFO, _JA): "ℹ️  分析完了\n重大なセキュリティ上の問題は特定されませんでした。",
    (RiskLevel.CRITICAL, _EN): "🚨 CRITICAL RISK DETECTED - Execution automatically blocked for safety.",
    (RiskLevel.HIGH, _EN): (
        "⚠️  HIGH RISK DETECTED\n"
        "This script performs operations that could be dangerous.\n"
        "Please review the analysis carefully before proceeding."
    ),
    (RiskLevel.MEDIUM, _EN): (
        "🔸 MEDIUM RISK DETECTED\n"
        "This script accesses system resources.\n"
        "Please review the analysis before proceeding."
    ),
    (RiskLevel.LOW, _EN): _EN_LOW_PROMPT,
    (RiskLevel.NONE, _EN): _EN_LOW_PROMPT,
    (RiskLevel.INFO, _EN): "ℹ️  ANALYSIS COMPLETE\nNo significant security concerns identified.",
}


def get_prompt_message(risk_level: RiskLevel, language: OutputLanguage) -> str:
    return _PROMPT_MESSAGES[(risk_level, language)]


def get_critical_warning(language: OutputLanguage) -> str:
    if language is _JA:
        return (
            "🚨 重要な警告: このスクリプトは極めて危険と判定されました！\n"
            "実行により深刻なセキュリティ被害を受ける可能性があります。\n"
            "本当に実行する必要があるか慎重に検討してください。"
        )
    return (
        "🚨 CRITICAL WARNING: This script has been identified as extremely dangerous!\n"
        "Execution may result in severe security compromise.\n"
        "Please carefully consider if execution is truly necessary."
    )


_JA_SIMPLE_PROMPT = "実行するには 'yes'、キャンセルするには 'no' を入力してください: "
_EN_SIMPLE_PROMPT = "Type 'yes' to execute, 'no' to cancel: "

_PROMPT_TEXTS = {
    (RiskLevel.CRITICAL, _JA): (
        "🚨 極めて危険と判定されましたが、実行を強行しますか？ \n"
        "本当に実行するには 'yes'、キャンセルするには 'no'、詳細を確認するには 'review' を入力してください: "
    ),
    (RiskLevel.CRITICAL, _EN): (
        "🚨 This script is CRITICALLY dangerous. Do you want to force execution? \n"
        "Type 'yes' to execute anyway, 'no' to cancel, or 'review' to see full details: "
    ),
    (RiskLevel.HIGH, _JA): (
        "⚠️  高リスクにも関わらず実行を続行しますか？ \n"
        "実行するには 'yes'、キャンセルするには 'no'、詳細を確認するには 'review' を入力してください: "
    ),
    (RiskLevel.MEDIUM, _JA): (
        "🔸 実行を続行しますか？ \n"
        "実行するには 'yes'、キャンセルするには 'no'、詳細を確認するには 'review' を入力してください: "
    ),
    (RiskLevel.LOW, _JA): _JA_SIMPLE_PROMPT,
    (RiskLevel.INFO, _JA): _JA_SIMPLE_PROMPT,
    (RiskLevel.NONE, _JA): _JA_SIMPLE_PROMPT,
    (RiskLevel.HIGH, _EN): (
        "⚠️  Do you want to proceed with execution despite the HIGH RISK? \n"
        "Type 'yes' to execute anyway, 'no' to cancel, or 'review' to see full details: "
    ),
    (RiskLevel.MEDIUM, _EN): (
        "🔸 Do you want to proceed with execution? \n"
        "Type 'yes' to execute, 'no' to cancel, or 'review' to see full details: "
    ),
    (RiskLevel.LOW, _EN): _EN_SIMPLE_PROMPT,
    (RiskLevel.INFO, _EN): _EN_SIMPLE_PROMPT,
    (RiskLevel.NONE, _EN): _EN_SIMPLE_PROMPT,
}


def get_prompt_text(risk_level: RiskLevel, language: OutputLanguage) -> str:
    return _PROMPT_TEXTS[(risk_level, language)]