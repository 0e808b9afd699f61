"""
World loader - Load and validate world documents from YAML or JSON files
"""

from __future__ import annotations

import json
import logging
from pathlib import Path

import yaml

from storyloom.engine.integrity import WorldValidator
from storyloom.errors import WorldIntegrityError
from storyloom.models.world import WorldModel

logger = logging.getLogger(__name__)

WORLD_SUFFIXES = (".yaml", ".yml", ".json")


class WorldLoader:
    """Loads World Models from document files"""

    def __init__(self, worlds_dir: str | Path | None = None):
        """Initialize with worlds directory path"""
        if worlds_dir is None:
            # Default to the worlds bundled with the package
            worlds_dir = Path(__file__).parent.parent / "worlds"
        self.worlds_dir = Path(worlds_dir)

    def list_worlds(self) -> list[dict]:
        """List available worlds with metadata"""
        worlds = []

        if not self.worlds_dir.exists():
            return worlds

        for world_path in sorted(self.worlds_dir.iterdir()):
            if not world_path.is_file() or world_path.suffix not in WORLD_SUFFIXES:
                continue
            try:
                data = self._read_document(world_path)
            except (OSError, ValueError, yaml.YAMLError) as e:
                logger.warning(f"Skipping unreadable world file {world_path}: {e}")
                continue
            if not isinstance(data, dict):
                logger.warning(f"Skipping world file {world_path}: not a mapping")
                continue
            description = str(data.get("description", ""))
            worlds.append({
                "id": world_path.stem,
                "name": data.get("name", world_path.stem),
                "description": description[:200] + "..." if len(description) > 200 else description,
                "path": str(world_path),
            })

        return worlds

    def resolve_path(self, path_or_id: str | Path) -> Path:
        """Find the file for a world id or path.

        Raises:
            FileNotFoundError: If no matching file exists
        """
        candidate = Path(path_or_id)
        if candidate.is_file():
            return candidate

        for suffix in WORLD_SUFFIXES:
            world_path = self.worlds_dir / f"{path_or_id}{suffix}"
            if world_path.is_file():
                return world_path

        raise FileNotFoundError(f"World '{path_or_id}' not found in {self.worlds_dir}")

    def load(self, path_or_id: str | Path, validate: bool = True) -> WorldModel:
        """
        Load a World Model.

        Args:
            path_or_id: A file path, or a world id (file stem in worlds_dir)
            validate: Whether to run the integrity checks (default True)

        Returns:
            The parsed WorldModel

        Raises:
            FileNotFoundError: If the world doesn't exist
            pydantic.ValidationError: If the document doesn't match the schema
            WorldIntegrityError: If validation fails and validate=True
        """
        world_path = self.resolve_path(path_or_id)
        data = self._read_document(world_path)
        world = WorldModel.model_validate(data)

        if validate:
            result = WorldValidator(world).validate()
            for warning in result.warnings:
                logger.warning(f"{world_path.name}: {warning}")
            if not result.is_valid:
                logger.error(f"World '{world_path}' failed integrity check")
                raise WorldIntegrityError(result.errors)

        logger.info(f"Loaded world from {world_path}")
        return world

    def _read_document(self, path: Path) -> object:
        with open(path, encoding="utf-8") as f:
            if path.suffix == ".json":
                return json.load(f)
            return yaml.safe_load(f)


def save_world(world: WorldModel, path: str | Path) -> Path:
    """Write a World Model as YAML or JSON, chosen by file suffix"""
    path = Path(path)
    document = world.to_document()
    with open(path, "w", encoding="utf-8") as f:
        if path.suffix == ".json":
            json.dump(document, f, indent=2)
        else:
            yaml.safe_dump(document, f, sort_keys=False, allow_unicode=True)
    return path
