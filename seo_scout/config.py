# === FILE: seo_scout/config.py ===
"""
Модуль для загрузки и валидации конфигурации краулера SEOScout.
Используется Pydantic для описания схемы и проверки данных.
"""
from __future__ import annotations

import errno
import json
import os
from pathlib import Path
from typing import Any, Union

import yaml
from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    HttpUrl,
    ValidationError,
    field_validator,
    model_validator,
)


class CrawlerConfig(BaseModel):
    """Конфигурация одного запуска обхода."""
    model_config = ConfigDict(extra="forbid", frozen=True)

    base_url: HttpUrl = Field(..., description="Seed URL, задаёт домен обхода.")
    max_depth: int = Field(3, ge=0, description="Максимальная глубина обхода ссылок.")
    fetch_timeout: float = Field(5.0, gt=0, description="Таймаут загрузки страницы (секунд).")
    probe_timeout: float = Field(30.0, gt=0, description="Таймаут навигации браузера (секунд).")
    oracle_timeout: float = Field(60.0, gt=0, description="Таймаут запроса к LLM (секунд).")
    user_agent: str = Field("SEOScoutBot/1.0", min_length=1, description="Заголовок User-Agent.")
    slow_load_threshold: float = Field(3.0, gt=0, description="Порог медленной загрузки (секунд).")
    large_resource_kb: float = Field(100.0, gt=0, description="Порог «тяжёлого» ресурса (КБ).")
    llm_model: str = Field("gpt-4o-mini", min_length=1, description="Модель для подсказок.")
    llm_max_tokens: int = Field(1500, ge=1, description="Лимит токенов ответа LLM.")
    enable_probe: bool = Field(True, description="Замерять скорость через headless-браузер.")
    enable_oracle: bool = Field(True, description="Запрашивать подсказки у LLM.")

    @field_validator("base_url", mode="before")
    def _strip_whitespace(cls, v: Any) -> Any:
        if isinstance(v, str):
            return v.strip()
        return v

    @model_validator(mode="after")
    def _check_timeouts(self) -> CrawlerConfig:
        if self.probe_timeout < self.fetch_timeout:
            raise ValueError("probe_timeout must not be shorter than fetch_timeout")
        return self

    @property
    def seed_url(self) -> str:
        return str(self.base_url)


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


def load_config(path: Union[str, Path, None] = None, **overrides: Any) -> CrawlerConfig:
    """
    Читает YAML или JSON (если задан путь), накладывает overrides
    (значения из командной строки) и возвращает проверенный CrawlerConfig.
    Значения None в overrides игнорируются.
    """
    data: dict[str, Any] = {}
    if path is not None:
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

    data.update({k: v for k, v in overrides.items() if v is not None})
    return CrawlerConfig(**data)


__all__ = ["CrawlerConfig", "load_config", "ValidationError"]
