from typing import Final


SKILL_FILENAME: Final[str] = "SKILL.md"
SKILLS_DIRNAME: Final[str] = "skills"
AGENTS_DIRNAME: Final[str] = "agents"
PIPELINE_DIRNAME: Final[str] = "pipeline"
PIPELINE_AGENTS_DIRNAME: Final[str] = "agents"

CONFIG_FILENAMES: Final[tuple[str, ...]] = (
    "skill-corpus.yaml",
    ".skill-corpus.yaml",
)

RESULTS_DIRNAME: Final[str] = "skill-test-results"
SUMMARY_FILENAME: Final[str] = "SUMMARY.md"
INDEX_FILENAME: Final[str] = "skills-index.json"

ROOT_ENV_VAR: Final[str] = "SKILL_CORPUS_ROOT"

# Fence info strings accepted by the language-tags check.
KNOWN_LANGUAGES: Final[frozenset[str]] = frozenset(
    {
        "bash",
        "c",
        "c#",
        "cpp",
        "cs",
        "csharp",
        "css",
        "csv",
        "dart",
        "diff",
        "docker",
        "dockerfile",
        "dotenv",
        "env",
        "erb",
        "go",
        "gradle",
        "graphql",
        "groovy",
        "hcl",
        "html",
        "http",
        "ini",
        "java",
        "javascript",
        "js",
        "json",
        "json5",
        "jsonc",
        "jsx",
        "kotlin",
        "kt",
        "makefile",
        "markdown",
        "md",
        "mermaid",
        "nginx",
        "plaintext",
        "powershell",
        "promql",
        "properties",
        "proto",
        "protobuf",
        "ps1",
        "py",
        "python",
        "rb",
        "regex",
        "rego",
        "ruby",
        "rust",
        "rs",
        "scss",
        "sh",
        "shell",
        "sql",
        "svelte",
        "swift",
        "terraform",
        "text",
        "tf",
        "toml",
        "ts",
        "tsx",
        "txt",
        "typescript",
        "vue",
        "xml",
        "yaml",
        "yml",
        "zsh",
        "astro",
        "console",
        "gherkin",
        "liquid",
        "mdx",
        "razor",
        "xaml",
    }
)
