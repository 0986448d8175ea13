# favscout/report/json_report.py

"""
Генерация JSON-отчёта о запуске FavScout.

Сериализация объекта RunSummary в файл.
"""
import json
from pathlib import Path

from favscout.models import RunSummary


def render_json(summary: RunSummary, output_path: Path | str) -> Path:
    """
    Сохраняет отчёт summary в формате JSON по указанному пути.

    :param summary: объект RunSummary с результатами запуска
    :param output_path: путь к JSON-файлу
    :return: Path сохранённого файла
    """
    output = Path(output_path)
    output.parent.mkdir(parents=True, exist_ok=True)

    with output.open('w', encoding='utf-8') as f:
        json.dump(summary.as_dict(), f, ensure_ascii=False, indent=2)

    return output
