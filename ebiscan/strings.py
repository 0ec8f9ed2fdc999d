"""Localized labels used in reports and summaries."""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping

from .locale import OutputLanguage

ENGLISH_STRINGS: Mapping[str, str] = MappingProxyType(
    {
        # Risk levels
        "risk_level_critical": "CRITICAL",
        "risk_level_high": "HIGH",
        "risk_level_medium": "MEDIUM",
        "risk_level_low": "LOW",
        "risk_level_info": "INFO",
        "risk_level_none": "NONE",
        # Execution recommendations
        "execution_safe": "SAFE",
        "execution_caution": "CAUTION",
        "execution_dangerous": "DANGEROUS",
        "execution_blocked": "BLOCKED",
        # Section headers
        "section_analysis_summary": "ANALYSIS SUMMARY",
        "section_code_vulnerability_analysis": "CODE VULNERABILITY ANALYSIS",
        "section_injection_detection_analysis": "INJECTION DETECTION ANALYSIS",
        "section_risk_explanation": "RISK EXPLANATION",
        "section_recommended_mitigations": "RECOMMENDED MITIGATIONS",
        "section_execution_recommendation": "EXECUTION RECOMMENDATION",
        # Messages
        "message_analysis_error": "ANALYSIS ERROR",
        "message_execution_blocked": "EXECUTION BLOCKED DUE TO SECURITY CONCERNS",
        "message_review_required": "REVIEW REQUIRED",
        "message_blocked": "BLOCKED",
        "message_script_type_bash": "Bash",
        "message_script_type_python": "Python",
        "message_script_type_unknown": "Unknown",
        "message_script_type_large": "Large Script",
        "message_script_type_simple": "Simple Script",
        "message_script_type_regular": "Regular Script",
        # Descriptions
        "desc_safe_execution": "Low risk, likely safe to execute",
        "desc_caution_execution": "Medium risk, review carefully before executing",
        "desc_dangerous_execution": "High risk, execution not recommended",
        "desc_blocked_execution": "Critical risk or analysis failure, execution blocked",
        "desc_analysis_failure": "For security, script execution is blocked when analysis fails.",
        # Report header
        "report_header": "EBI SECURITY ANALYSIS REPORT",
        "report_script_info": "Script",
        "report_overall_risk": "OVERALL RISK LEVEL",
    }
)

JAPANESE_STRINGS: Mapping[str, str] = MappingProxyType(
    {
        # Risk levels
        "risk_level_critical": "クリティカル",
        "risk_level_high": "高",
        "risk_level_medium": "中",
        "risk_level_low": "低",
        "risk_level_info": "情報",
        "risk_level_none": "なし",
        # Execution recommendations
        "execution_safe": "安全",
        "execution_caution": "注意",
        "execution_dangerous": "危険",
        "execution_blocked": "ブロック",
        # Section headers
        "section_analysis_summary": "分析サマリー",
        "section_code_vulnerability_analysis": "コード脆弱性分析",
        "section_injection_detection_analysis": "インジェクション検出分析",
        "section_risk_explanation": "リスク説明",
        "section_recommended_mitigations": "推奨緩和策",
        "section_execution_recommendation": "実行推奨",
        # Messages
        "message_analysis_error": "分析エラー",
        "message_execution_blocked": "セキュリティ上の懸念により実行がブロックされました",
        "message_review_required": "レビューが必要",
        "message_blocked": "ブロック",
        "message_script_type_bash": "Bash",
        "message_script_type_python": "Python",
        "message_script_type_unknown": "不明",
        "message_script_type_large": "大型スクリプト",
        "message_script_type_simple": "シンプルスクリプト",
        "message_script_type_regular": "通常スクリプト",
        # Descriptions
        "desc_safe_execution": "低リスク、実行しても安全とみなされます",
        "desc_caution_execution": "中リスク、実行前に慎重に確認してください",
        "desc_dangerous_execution": "高リスク、実行は推奨されません",
        "desc_blocked_execution": "クリティカルリスクまたは分析失敗、実行がブロックされました",
        "desc_analysis_failure": "セキュリティのため、分析に失敗した場合はスクリプトの実行がブロックされます。",
        # Report header
        "report_header": "EBI セキュリティ分析レポート",
        "report_script_info": "スクリプト",
        "report_overall_risk": "総合リスクレベル",
    }
)

_TABLES: Mapping[OutputLanguage, Mapping[str, str]] = MappingProxyType(
    {
        OutputLanguage.ENGLISH: ENGLISH_STRINGS,
        OutputLanguage.JAPANESE: JAPANESE_STRINGS,
    }
)


@dataclass(frozen=True)
class LocalizedStrings:
    """Looks up report labels in the chosen output language."""

    output_language: OutputLanguage

    def get(self, key: str) -> str:
        """Return the label for ``key``, or an empty string if it is unknown."""
        return _TABLES[self.output_language].get(key, "")

    def get_risk_level(self, risk_level: str) -> str:
        return self.get(f"risk_level_{risk_level.lower()}")

    def get_execution_recommendation(self, recommendation: str) -> str:
        return self.get(f"execution_{recommendation.lower()}")

    def get_analysis_section(self, section: str) -> str:
        return self.get(f"section_{section.lower()}")

    def get_message(self, message: str) -> str:
        return self.get(f"message_{message.lower()}")