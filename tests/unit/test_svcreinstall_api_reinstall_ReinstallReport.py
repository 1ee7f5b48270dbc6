"""Unit tests for svcreinstall.api.reinstall.ReinstallReport."""

from svcreinstall.api.reinstall import PhaseResult, ReinstallReport, RunState


def test_failed_phase_becomes_warning():
    report = ReinstallReport(service_path="Foo.exe", service_name="Foo")
    report.add(PhaseResult.failed("stop", "Failed to stop Foo", "Access is denied", service="Foo"))

    assert report.warnings == ["Failed to stop Foo: Access is denied"]
    assert report.errors == []
    assert report.exit_code == 0


def test_fatal_failure_sets_failed_state():
    report = ReinstallReport(service_path="Foo.exe", service_name="Foo", state=RunState.INSTALLING)
    report.add(PhaseResult.failed("install", "Install failed", "exit code 1"), fatal=True)

    assert report.state is RunState.FAILED
    assert report.errors == ["Install failed: exit code 1"]
    assert report.warnings == []
    assert report.exit_code == 1
    assert report.summary() == "Reinstall failed: Install failed: exit code 1"


def test_started_services_tracked():
    report = ReinstallReport(service_path="Foo.exe", service_name="Foo")
    report.add(PhaseResult.ok("start", "Started Foo", service="Foo"))
    report.add(PhaseResult.failed("start", "Failed to start FooBackup", "boom", service="FooBackup"))
    report.state = RunState.DONE

    assert report.started == ["Foo"]
    assert report.summary() == "Service reinstalled, started: Foo"


def test_to_output_matches_schema():
    report = ReinstallReport(service_path="Foo.exe", service_name="Foo", name_guessed=True)
    report.add(PhaseResult.skipped("stop", "Service Foo not found, nothing to stop", service="Foo"))
    report.add(PhaseResult.ok("install", "Service installed", output="done"))
    report.state = RunState.DONE

    output = report.to_output()
    assert output["state"] == "done"
    assert output["exit_code"] == 0
    assert output["name_guessed"] is True
    assert output["phases"][0] == {
        "phase": "stop",
        "outcome": "skipped",
        "message": "Service Foo not found, nothing to stop",
        "reason": "",
        "output": "",
        "service": "Foo",
    }
    assert output["phases"][1]["output"] == "done"
    assert output["errors"] == []
