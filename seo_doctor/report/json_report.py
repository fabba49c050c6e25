# seo_doctor/report/json_report.py

"""
JSON report for SEO Doctor.

Serializes a Report into a file.
"""
import json
from pathlib import Path

from seo_doctor.models import Report


def render_json(report: Report, output_path: Path | str) -> Path:
    """
    Save *report* as JSON at *output_path*.

    :param report: the audit Report
    :param output_path: path of the JSON file
    :return: Path of the written file

    Example:
    ```python
    from seo_doctor.report.json_report import render_json
    report_path = render_json(report, 'reports/seo.json')
    print(f"JSON report saved to: {report_path}")
    ```
    """
    output = Path(output_path)
    output.parent.mkdir(parents=True, exist_ok=True)

    with output.open('w', encoding='utf-8') as f:
        json.dump(report.to_dict(), f, ensure_ascii=False, indent=2)

    return output
