from jinja2 import Environment, FileSystemLoader, select_autoescape
import json, os

from schemas.guard import Report


# ── Row extraction for the operator summary ──────────────────────
def _summary_row(entry: dict) -> dict:
    """Flatten one servicable event into the columns the summary shows."""
    sections = entry.get("SERVICABLE_EVENT", {}).get("CEC_ERROR_LOG", [])
    errlog = sections[0] if sections else {}
    resource = {}
    for section in sections[1:]:
        resource = section.get("RESOURCE_ACTIONS", resource)
    callouts = errlog.get("Callout Section", {}) or {}
    return {
        "plid": errlog.get("PLID", ""),
        "src": errlog.get("SRC", ""),
        "date_time": errlog.get("DATE_TIME", ""),
        "callout_count": callouts.get("Callout Count", 0),
        "type": resource.get("TYPE", ""),
        "state": resource.get("CURRENT_STATE", ""),
        "reason": resource.get("REASON_DESCRIPTION", ""),
    }


def build_summary_context(report: Report, guard_count: int | None = None) -> dict:
    rows = [_summary_row(e) for e in report]
    return {
        "rows": rows,
        "entry_count": len(rows),
        "guard_count": len(rows) if guard_count is None else guard_count,
        "deconfigured_count": sum(1 for r in rows if r["state"] == "DECONFIGURED"),
    }


def render_summary(report: Report, guard_count: int | None = None,
                   template_name: str = "summary.txt.j2") -> str:
    base_dir = os.path.dirname(__file__)
    env = Environment(
        loader=FileSystemLoader(base_dir),
        autoescape=select_autoescape(["html", "xml"]),
        keep_trailing_newline=True,
    )
    template = env.get_template(template_name)
    return template.render(**build_summary_context(report, guard_count))


def report_to_json(report: Report) -> str:
    return json.dumps(report, indent=4)


def write_report_json(report: Report, out_path: str = None) -> str:
    if out_path is None:
        out_path = os.path.join(os.getcwd(), "faultlog.json")
    with open(out_path, "w", encoding="utf-8") as f:
        f.write(report_to_json(report))
        f.write("\n")
    return out_path


def write_summary(report: Report, out_path: str, guard_count: int | None = None) -> str:
    with open(out_path, "w", encoding="utf-8") as f:
        f.write(render_summary(report, guard_count))
    return out_path
