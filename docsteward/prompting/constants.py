"""Task names, report titles and prompts for stewardship runs."""

from __future__ import annotations

import textwrap

SOURCE_CHANGES = "source_changes"
QUALITY_ANALYSIS = "quality_analysis"
DRIFT_DETECTION = "drift_detection"
IMPROVEMENTS = "improvements"
AUTOMATIC_FIXES = "automatic_fixes"

TASK_ORDER: tuple[str, ...] = (
    SOURCE_CHANGES,
    QUALITY_ANALYSIS,
    DRIFT_DETECTION,
    IMPROVEMENTS,
    AUTOMATIC_FIXES,
)

COMMAND_TASKS: dict[str, str] = {
    "monitor": SOURCE_CHANGES,
    "quality": QUALITY_ANALYSIS,
    "drift": DRIFT_DETECTION,
    "improve": IMPROVEMENTS,
    "fix": AUTOMATIC_FIXES,
}

TASK_TITLES: dict[str, str] = {
    SOURCE_CHANGES: "Source Changes Monitoring",
    QUALITY_ANALYSIS: "Documentation Quality Analysis",
    DRIFT_DETECTION: "Documentation Drift Detection",
    IMPROVEMENTS: "Improvement Suggestions Generation",
    AUTOMATIC_FIXES: "Automatic Fixes Proposal",
}

# (task, report heading, placeholder when the task produced nothing)
REPORT_SECTIONS: tuple[tuple[str, str, str], ...] = (
    (SOURCE_CHANGES, "Executive Summary", "Analysis not completed"),
    (QUALITY_ANALYSIS, "Documentation Quality Analysis", "Analysis not completed"),
    (DRIFT_DETECTION, "Synchronization Status", "Analysis not completed"),
    (IMPROVEMENTS, "Improvement Recommendations", "Analysis not completed"),
    (AUTOMATIC_FIXES, "Automated Fixes Applied", "No automatic fixes applied"),
)

NEXT_ACTIONS: tuple[str, ...] = (
    "Review and approve suggested improvements",
    "Implement high-priority fixes",
    "Update documentation sync mappings if needed",
    "Schedule follow-up steward run",
)

SYSTEM_PROMPTS: dict[str, str] = {
    SOURCE_CHANGES: "You are a documentation quality expert. Be specific and actionable in your analysis.",
    QUALITY_ANALYSIS: (
        "You are an expert technical writer focused on developer experience. "
        "Provide detailed, actionable feedback."
    ),
    DRIFT_DETECTION: "You are a documentation synchronization expert. Focus on completeness and accuracy.",
    IMPROVEMENTS: (
        "You are a product manager focused on developer documentation experience. "
        "Think strategically about improvements."
    ),
    AUTOMATIC_FIXES: (
        "You are a careful documentation maintainer. "
        "Only make safe, obvious improvements that clearly add value."
    ),
}

_PROMPTS: dict[str, str] = {
    SOURCE_CHANGES: """
        Analyze the current state of this repository's documentation:
        1. Check git status for any uncommitted documentation changes
        2. Review recent commits that might affect documentation
        3. Identify any documentation files that need updates
        4. Look for new features that lack documentation
        5. Check for broken internal links or outdated information

        Focus specifically on:
        - README.md completeness and accuracy
        - docs/ directory structure and content
        - Missing setup instructions
        - Outdated configuration examples
        - New features without documentation

        Provide specific actionable recommendations for documentation improvements.
    """,
    QUALITY_ANALYSIS: """
        Perform a comprehensive documentation quality audit:

        1. **Content Analysis**:
           - Check for outdated information
           - Identify missing prerequisites
           - Verify example code accuracy
           - Review completeness of setup guides

        2. **Structure Analysis**:
           - Evaluate information hierarchy
           - Check for logical flow
           - Identify gaps in user journey
           - Review navigation clarity

        3. **Technical Accuracy**:
           - Verify command examples
           - Check environment variable references
           - Validate Docker configurations
           - Review API documentation

        4. **User Experience**:
           - Assess beginner-friendliness
           - Check for common troubleshooting scenarios
           - Evaluate examples clarity
           - Review error handling guidance

        Provide specific recommendations with priority levels (High/Medium/Low).
    """,
    DRIFT_DETECTION: """
        Compare the original documentation in the {upstream_name} with the synchronized documentation:

        1. Check for any files that failed to sync
        2. Identify content differences or formatting issues
        3. Look for broken links after synchronization
        4. Verify that all new documentation is being captured
        5. Check if sync mappings are complete and accurate

        Also suggest improvements to the sync process:
        - Missing file mappings
        - Better organization structure
        - Enhanced content processing
        - Automated quality checks

        Focus on ensuring complete coverage and accuracy of synchronized content.
    """,
    IMPROVEMENTS: """
        Based on the current documentation state, generate specific improvement suggestions:

        1. **Content Enhancements**:
           - Missing sections or topics
           - Areas needing more detail
           - Examples that could be improved
           - Common user questions not addressed

        2. **Structural Improvements**:
           - Better organization proposals
           - Navigation enhancements
           - Cross-referencing opportunities
           - Search optimization

        3. **Automation Opportunities**:
           - Processes that could be automated
           - Quality checks that could be implemented
           - Validation scripts that could be added
           - Monitoring improvements

        4. **User Experience Enhancements**:
           - Onboarding flow improvements
           - Interactive elements
           - Visual aids or diagrams
           - Quick start optimizations

        Prioritize suggestions based on impact and implementation effort.
    """,
    AUTOMATIC_FIXES: """
        Identify and implement safe, automatic fixes for documentation issues:

        1. **Safe Automated Fixes**:
           - Fix obvious typos and formatting issues
           - Update date references
           - Standardize code block formatting
           - Fix broken internal links
           - Update version references

        2. **Content Validation**:
           - Verify command syntax
           - Check environment variable consistency
           - Validate Docker image references
           - Confirm URL accessibility

        3. **Quality Improvements**:
           - Enhance code examples
           - Add missing error handling examples
           - Improve prerequisite clarity
           - Standardize terminology

        Only make changes that are clearly beneficial and low-risk.
        Document all changes made for review.
    """,
}


def task_prompt(name: str, *, upstream_name: str) -> str:
    """Return the dedented prompt for ``name``."""
    template = textwrap.dedent(_PROMPTS[name]).strip()
    return template.format(upstream_name=upstream_name)


__all__ = [
    "AUTOMATIC_FIXES",
    "COMMAND_TASKS",
    "DRIFT_DETECTION",
    "IMPROVEMENTS",
    "NEXT_ACTIONS",
    "QUALITY_ANALYSIS",
    "REPORT_SECTIONS",
    "SOURCE_CHANGES",
    "SYSTEM_PROMPTS",
    "TASK_ORDER",
    "TASK_TITLES",
    "task_prompt",
]
