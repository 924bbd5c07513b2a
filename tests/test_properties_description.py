# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab

import yaml

from xq_lib.properties.description import JobDescription


def test_job_description_defaults():
    desc = JobDescription()

    assert desc.executable is None
    assert desc.arguments == []
    assert desc.environment == {}
    assert desc.node_count == 1
    assert desc.processes_per_node == 1
    assert desc.max_time == 15
    assert not desc.interactive


def test_job_description_defaults_are_not_shared():
    first = JobDescription()
    second = JobDescription()
    first.arguments.append("-v")

    assert second.arguments == []


def test_job_description_str_is_deterministic():
    desc = JobDescription(
        executable="/bin/sleep",
        arguments=["10"],
        queue_name="all.q",
        parallel_environment="mpi",
        node_count=2,
    )

    assert str(desc) == str(JobDescription(**desc.__dict__))
    assert str(desc).startswith(
        "JobDescription [executable=/bin/sleep, arguments=['10'], environment={}, "
        "queue=all.q, parallel_environment=mpi, nodes=2, "
    )


def test_job_description_to_yaml():
    desc = JobDescription(executable="/bin/hostname", environment={"A": "1"})
    data = yaml.safe_load(desc.toYaml())

    assert data["executable"] == "/bin/hostname"
    assert data["environment"] == {"A": "1"}
    assert data["node_count"] == 1
