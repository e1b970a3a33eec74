# src/lsa/config.py

VCS_DIR_NAME = ".git"

# Per-directory ignore files, lowest precedence first
IGNORE_FILE_NAMES = [".gitignore", ".ignore"]

PLACEHOLDER = "<binary or unreadable>"
SEPARATOR = "-" * 21

# Above this size the snapshot gets an advisory about --source-only / --max-size
SIZE_ADVISORY_THRESHOLD = 32 * 1024

SOURCE_EXTENSIONS = frozenset({
    # Systems
    "rs", "c", "h", "cc", "cpp", "cxx", "hpp", "hh", "go", "zig", "swift",
    "m", "mm", "java", "kt", "kts", "scala", "cs", "fs", "d", "nim",
    # Scripting
    "py", "pyi", "rb", "php", "pl", "pm", "lua", "r", "jl", "dart",
    "ex", "exs", "erl", "hrl", "hs", "ml", "mli", "clj", "cljs", "elm",
    "sh", "bash", "zsh", "fish", "ps1", "bat", "cmd",
    # Web
    "js", "mjs", "cjs", "jsx", "ts", "tsx", "vue", "svelte", "astro",
    "html", "htm", "css", "scss", "sass", "less",
    # Data / config
    "json", "jsonc", "yaml", "yml", "toml", "ini", "cfg", "conf", "xml",
    "sql", "graphql", "gql", "proto", "env", "lock",
    # Build
    "cmake", "mk", "gradle", "nix", "tf", "dockerfile",
    # Docs
    "md", "mdx", "rst", "txt", "adoc", "tex",
})

# Matched only when the path has no extension
SOURCE_FILENAMES = frozenset({
    "makefile",
    "dockerfile",
    "containerfile",
    "justfile",
    "rakefile",
    "gemfile",
    "procfile",
    "vagrantfile",
    "jenkinsfile",
    "readme",
    "license",
    "licence",
    "copying",
    "changelog",
    "authors",
    "contributing",
    ".env",
    ".gitignore",
    ".gitattributes",
    ".dockerignore",
    ".editorconfig",
})
