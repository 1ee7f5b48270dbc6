"""Service find command - lists services whose name matches a fragment."""

from collections.abc import Iterator

from .._output_schemas.service import ServiceFindOutput
from ..StageResult import StageResult
from .match_services import match_services
from .Service import Service


def cmd_find(name: str) -> StageResult:
    """Find registered services by name fragment.

    Uses the same case-insensitive substring match as the reinstall start
    phase, so it shows which services a reinstall would try to start.
    """

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        yield (0.2, "Querying service manager...")
        try:
            with Service() as service:
                matches = match_services(service.list_services(), name)
        except Exception as e:
            yield (1.0, "Complete")
            result_obj.result = f"Error querying services: {e}"
            result_obj.output = ServiceFindOutput(
                errors=[str(e)],
                warnings=[],
                hint=name,
                services=[],
                count=0,
            ).model_dump(mode="python")
            result_obj.success = False
            return

        yield (1.0, "Complete")
        if matches:
            result_obj.result = f"Found {len(matches)} service(s) matching {name!r}"
            warnings = []
        else:
            result_obj.result = f"No services match {name!r}"
            warnings = [result_obj.result]
        result_obj.output = ServiceFindOutput(
            errors=[],
            warnings=warnings,
            hint=name,
            services=[m.to_dict() for m in matches],
            count=len(matches),
        ).model_dump(mode="python")
        result_obj.success = True

    return StageResult(
        announce=f"Searching services for {name!r}...",
        progress_callback=do_work,
    )
