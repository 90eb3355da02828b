from pathlib import Path

from .manifest import ProjectManifest


def discover_token_files(root: Path, manifest: ProjectManifest) -> list[Path]:
    files: list[Path] = []
    for pattern in manifest.source:
        for p in root.glob(pattern):
            if p.is_file():
                files.append(p.resolve())
    return sorted(set(files))
