"""
Lingest Ignore Patterns

Default ignore globs and merging logic for the command line.
The core never applies these on its own: the host merges them into the
request's ignore list.
"""

from pathlib import PurePath
from typing import Iterable, Optional


def _dir_globs(*names: str) -> list[str]:
    """Globs hiding a directory and everything below it, at any depth."""
    globs = []
    for name in names:
        globs.append(f"**/{name}/**")
        globs.append(f"**/{name}")
    return globs


# --- Default Ignore Globs ---
# Hardcoded sensible defaults, grouped by ecosystem

DEFAULT_IGNORE_GLOBS: tuple[str, ...] = tuple(
    # Python
    ["**/*.pyc", "**/*.pyo", "**/*.pyd", "**/.coverage", "**/poetry.lock", "**/Pipfile.lock"]
    + ["**/*.egg", "**/*.whl"]
    + _dir_globs(
        "__pycache__", ".pytest_cache", ".tox", ".nox", ".mypy_cache",
        ".ruff_cache", ".hypothesis", "*.egg-info", "site-packages",
    )
    # JavaScript/Node
    + ["**/package-lock.json", "**/yarn.lock", "**/pnpm-lock.yaml", "**/bun.lock", "**/bun.lockb"]
    + _dir_globs("node_modules", "bower_components", ".npm", ".yarn", ".pnpm-store")
    # Java
    + ["**/*.class", "**/*.jar", "**/*.war", "**/*.ear", "**/*.nar"]
    + ["**/.classpath", "**/gradle-app.setting", "**/*.gradle", "**/.project"]
    + _dir_globs(".gradle", ".settings")
    # C/C++
    + [
        "**/*.o", "**/*.obj", "**/*.dll", "**/*.dylib", "**/*.so", "**/*.exe",
        "**/*.lib", "**/*.out", "**/*.a", "**/*.pdb",
    ]
    # Swift/Xcode
    + ["**/*.pbxuser", "**/*.mode1v3", "**/*.mode2v3", "**/*.perspectivev3", "**/*.xcuserstate"]
    + _dir_globs(".build", "*.xcodeproj", "*.xcworkspace", "xcuserdata", ".swiftpm")
    # Ruby
    + ["**/*.gem", "**/Gemfile.lock", "**/.ruby-version", "**/.ruby-gemset", "**/.rvmrc"]
    + _dir_globs(".bundle", "vendor/bundle")
    # Rust
    + ["**/Cargo.lock", "**/*.rs.bk"]
    + _dir_globs("target")
    # Go
    + _dir_globs("pkg", "bin")
    # .NET/C#
    + ["**/*.suo", "**/*.user", "**/*.userosscache", "**/*.sln.docstates", "**/*.nupkg"]
    + _dir_globs("obj")
    # Version control
    + ["**/.gitignore", "**/.gitattributes", "**/.gitmodules"]
    + _dir_globs(".git", ".svn", ".hg")
    # Images and media
    + [
        f"**/*.{ext}"
        for ext in (
            "svg", "png", "jpg", "jpeg", "gif", "ico", "bmp", "webp", "tiff", "psd",
            "raw", "heif", "indd", "ai", "eps",
            "mov", "mp4", "avi", "wmv", "flv", "mkv", "webm", "vob", "ogv", "m4v",
            "3gp", "3g2", "mpeg", "mpg",
            "mp3", "wav", "flac", "aac", "ogg", "wma", "m4a", "opus", "aiff", "ape",
        )
    ]
    # Virtual environments
    + ["**/.env", "**/.env.local", "**/.env.*.local", "**/.env.production"]
    + _dir_globs("venv", ".venv", "env", "virtualenv")
    # IDEs and editors
    + ["**/*.swo", "**/*.swn", "**/*.swp", "**/*.sublime-*"]
    + _dir_globs(".idea", ".vscode", ".vs")
    # Temporary and cache files
    + [
        "**/*.log", "**/*.bak", "**/*.backup", "**/*.tmp", "**/*.temp", "**/.eslintcache",
        "**/.stylelintcache", "**/.DS_Store", "**/Thumbs.db", "**/desktop.ini",
        "**/*.orig", "**/*.rej", "**/*~",
    ]
    + _dir_globs(
        ".cache", ".sass-cache", ".parcel-cache", ".webpack", ".rollup",
        ".rpt2_cache", ".pnpm", ".rush", ".nyc_output",
    )
    # Build directories and artifacts
    + _dir_globs("build", "dist", "out", "coverage", ".next", ".nuxt", "_site", ".docusaurus")
    + ["**/public/build/**", "**/docs/_build/**"]
    # Generated files
    + ["**/*.generated.*", "**/*.min.js", "**/*.min.css", "**/*.map"]
    # Archives and packages
    + [f"**/*.{ext}" for ext in ("zip", "tar", "gz", "rar", "7z", "bz2", "xz", "iso", "dmg", "pkg")]
    # Documents
    + [
        f"**/*.{ext}"
        for ext in ("pdf", "doc", "docx", "xls", "xlsx", "ppt", "pptx", "odt", "ods", "odp")
    ]
    # Fonts
    + [f"**/*.{ext}" for ext in ("ttf", "otf", "woff", "woff2", "eot", "fon", "fnt")]
    # Databases
    + ["**/*.db", "**/*.sqlite", "**/*.sqlite3", "**/*.mdb", "**/*.accdb"]
    # Terraform
    + ["**/*.tfstate*"]
    + _dir_globs(".terraform")
    # Dependencies
    + _dir_globs("vendor", "third_party", "external")
    # Data files
    + ["**/*.csv", "**/*.tsv", "**/*.xml"]
    # Logs
    + _dir_globs("logs")
    # Previous digests
    + ["**/digest.txt"]
)


def parse_glob_list(value: Optional[str]) -> list[str]:
    """Split a comma-separated glob list, dropping blanks."""
    if not value:
        return []
    return [part.strip() for part in value.split(",") if part.strip()]


def build_ignore_globs(
    output_path: str,
    user_globs: Iterable[str] = (),
    use_defaults: bool = True,
) -> list[str]:
    """Merge ignore globs for a run.

    Merge order (duplicates dropped, first occurrence wins):
    1. DEFAULT_IGNORE_GLOBS (unless use_defaults is False)
    2. ``**/<output file name>`` so earlier artifacts are never ingested
    3. User-supplied globs

    Args:
        output_path: Path of the artifact being written
        user_globs: Extra globs from config file and command line
        use_defaults: Include the built-in defaults

    Returns:
        Ordered list of ignore globs
    """
    merged: list[str] = []
    if use_defaults:
        merged.extend(DEFAULT_IGNORE_GLOBS)
    merged.append(f"**/{PurePath(output_path).name}")
    merged.extend(user_globs)
    return list(dict.fromkeys(merged))
