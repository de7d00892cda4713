import queue as channels

import pytest

from rustlings.exercises.threads import (
    JobStatus,
    Queue,
    complete_jobs,
    receive_all,
    run_sleepers,
    send_tx,
)


def test_run_sleepers_waits_for_all():
    assert run_sleepers(10, 0.01) == 10


def test_run_sleepers_prints_each(capsys):
    run_sleepers(3, 0.0)
    out = capsys.readouterr().out
    for index in range(3):
        assert f"thread {index} is complete" in out


def test_complete_jobs_counts_every_job():
    status = complete_jobs(10, 0.01)
    assert status == JobStatus(jobs_completed=10)


def test_complete_jobs_last_report_is_total(capsys):
    complete_jobs(4, 0.0)
    lines = capsys.readouterr().out.splitlines()
    assert lines[-1] == "jobs completed 4"


def test_send_tx_delivers_both_halves():
    queue = Queue()
    channel = channels.Queue()
    threads = send_tx(queue, channel, 0)
    for thread in threads:
        thread.join()
    values = []
    while not channel.empty():
        values.append(channel.get())
    assert sorted(values) == sorted(queue.first_half + queue.second_half)


def test_receive_all_gets_queue_length():
    queue = Queue()
    received = receive_all(queue, 0)
    assert len(received) == queue.length
    assert sorted(received) == sorted(queue.first_half + queue.second_half)


def test_receive_all_keeps_order_within_half():
    queue = Queue()
    received = receive_all(queue, 0)
    assert [v for v in received if v in queue.first_half] == list(queue.first_half)
    assert [v for v in received if v in queue.second_half] == list(queue.second_half)


def test_receive_all_rejects_wrong_length():
    queue = Queue(length=3)
    with pytest.raises(RuntimeError):
        receive_all(queue, 0)