# === FILE: favscout/config.py ===
"""
Модуль для загрузки и валидации конфигурации FavScout.
Используется Pydantic для описания схемы и проверки данных.
"""
from __future__ import annotations

import errno
import json
import os
from pathlib import Path
from typing import Any, Literal, Union

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

__all__ = ["FavScoutConfig", "load_config", "DEFAULT_DATABASE"]

DEFAULT_DATABASE = "favicons.db"


class FavScoutConfig(BaseModel):
    """Конфигурация одного запуска FavScout."""
    model_config = ConfigDict(extra="forbid", frozen=True)

    database: Path = Field(Path(DEFAULT_DATABASE), description="Файл SQLite с результатами.")
    timeout: float = Field(10.0, gt=0, description="Таймаут на один запрос (секунд).")
    concurrency: int = Field(1, ge=1, description="Сколько целевых URL обрабатывать параллельно.")
    refetch_digests: bool = Field(
        True, description="Скачивать favicon заново для каждого хэша (False: один запрос)."
    )
    extraction_mode: Literal["loose", "html"] = Field(
        "loose", description="loose: поиск по всему тексту; html: только атрибуты тегов."
    )

    @field_validator("database", mode="before")
    def _expand_user(cls, v: Any) -> Any:
        if isinstance(v, str):
            return Path(v).expanduser()
        return v


def _read_yaml(path: Path) -> dict[str, Any]:
    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    except yaml.YAMLError as exc:
        raise ValueError(f"Неправильный YAML в {path}: {exc}") from exc
    if not isinstance(data, dict):
        raise TypeError(f"Верхний уровень YAML должен быть mapping, получено {type(data).__name__}")
    return data


def _read_json(path: Path) -> dict[str, Any]:
    try:
        data = json.loads(path.read_text(encoding="utf-8")) or {}
    except json.JSONDecodeError as exc:
        raise ValueError(f"Неправильный JSON в {path}: {exc}") from exc
    if not isinstance(data, dict):
        raise TypeError(f"Верхний уровень JSON должен быть mapping, получено {type(data).__name__}")
    return data


def load_config(path: Union[str, Path, None]) -> FavScoutConfig:
    """
    Читает YAML или JSON и возвращает проверенный объект FavScoutConfig.
    Без пути возвращает значения по умолчанию; отсутствующий файл → FileNotFoundError.
    """
    if path is None:
        return FavScoutConfig()

    path_obj = Path(path).expanduser().resolve()
    if not path_obj.is_file():
        raise FileNotFoundError(errno.ENOENT, os.strerror(errno.ENOENT), str(path_obj))

    suffix = path_obj.suffix.lower()
    if suffix in (".yaml", ".yml"):
        data = _read_yaml(path_obj)
    elif suffix == ".json":
        data = _read_json(path_obj)
    else:
        raise ValueError(f"Неподдерживаемый формат конфига: {suffix}")

    try:
        return FavScoutConfig(**data)
    except ValidationError:
        raise
