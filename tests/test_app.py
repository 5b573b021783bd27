import pytest

from leave_tracker.app import create_service


@pytest.fixture
def data_env(tmp_path, monkeypatch):
    monkeypatch.setenv('LEAVE_DATA_DIR', str(tmp_path))
    monkeypatch.delenv('EMPLOYEES_FILE', raising=False)
    monkeypatch.delenv('APPLICATIONS_FILE', raising=False)
    monkeypatch.setenv('LOG_FILE', str(tmp_path / 'leave.log'))
    return tmp_path


def test_create_service_reads_env_file_and_seeds(data_env, monkeypatch):
    env_file = data_env / 'settings.env'
    env_file.write_text("EMPLOYEES_FILE=staff.json\n", encoding='utf-8')
    monkeypatch.setenv('EMPLOYEES_FILE', 'placeholder')
    monkeypatch.delenv('EMPLOYEES_FILE')

    service = create_service(env_file=str(env_file), seed=True)

    assert [e.emp_id for e in service.list_employees()] == [101, 102, 103]
    assert (data_env / 'staff.json').exists()


def test_create_service_restores_previous_state(data_env):
    first = create_service(env_file=str(data_env / 'missing.env'), seed=True)
    application = first.apply_leave(101, "2024-02-01", "2024-02-05", "Family trip")
    first.approve(application.leave_id)

    second = create_service(env_file=str(data_env / 'missing.env'))

    assert second.get_employee(101).leave_balance == 15
    assert second.apply_leave(102, "2024-03-01", "2024-03-01", "Errand").leave_id > application.leave_id
