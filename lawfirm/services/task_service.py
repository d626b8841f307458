import logging
from typing import Any, List, Mapping, Union

from lawfirm.integrity import check_references, ensure_exists
from lawfirm.lifecycle import TASK_TRANSITIONS, check_transition, resolve_status_date
from lawfirm.models import Task, TaskStatus
from lawfirm.services.base import EntityService
from lawfirm.tasks.schemas import TaskCreate, TaskUpdate
from lawfirm.validation import changes, require_not_null, shape

logger = logging.getLogger(__name__)


class TaskService(EntityService):
    model = Task

    def create(self, payload: Union[TaskCreate, Mapping[str, Any]]) -> Task:
        """Create a task on a case and assign it to a lawyer."""
        data = shape(TaskCreate, payload)
        values = data.model_dump()
        values["completed_date"] = resolve_status_date("completed_date", data.status, TaskStatus.COMPLETED, None)

        with self.storage.transaction(self.entity):
            check_references(self.storage, Task, values)
            task = self.storage.insert(Task, values)

        logger.info("Created task %s on case %s", task.id, task.case_id)
        return task

    def update(self, payload: Union[TaskUpdate, Mapping[str, Any]]) -> Task:
        data = shape(TaskUpdate, payload)
        values = changes(data, "id")
        require_not_null(values, "title", "priority", "status", "assigned_lawyer_id")

        with self.storage.transaction(self.entity):
            task = ensure_exists(self.storage, Task, data.id)
            check_references(self.storage, Task, values)

            target = values.get("status", task.status)
            check_transition(self.entity, TASK_TRANSITIONS, task.status, target)
            values["completed_date"] = resolve_status_date(
                "completed_date",
                target,
                TaskStatus.COMPLETED,
                values.get("completed_date"),
                current=task.completed_date,
                supplied_set="completed_date" in values,
            )
            task = self.storage.update(Task, data.id, values)

        logger.info("Updated task %s: %s", data.id, sorted(values))
        return task

    def get_by_case(self, case_id: int) -> List[Task]:
        return self.find_by(case_id=case_id)

    def get_by_lawyer(self, lawyer_id: int) -> List[Task]:
        """Tasks assigned to a lawyer."""
        return self.find_by(assigned_lawyer_id=lawyer_id)
