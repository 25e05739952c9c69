"""Goals and key results."""

from .base import ClickUpService


class GoalService(ClickUpService):

    def get_goals(self, include_completed: bool = False) -> list[dict]:
        self._log_operation("get_goals", include_completed=include_completed)
        result = self.client.get(
            f"/team/{self.team_id}/goal",
            params={"include_completed": include_completed},
        )
        return result.get("goals", [])

    def get_goal(self, goal_id: str) -> dict:
        self._log_operation("get_goal", goal_id=goal_id)
        return self.client.get(f"/goal/{goal_id}")["goal"]

    def create_goal(self, data: dict) -> dict:
        self._log_operation("create_goal", name=data.get("name"))
        goal = self.client.post(f"/team/{self.team_id}/goal", data)["goal"]
        self.logger.info("Created goal %s (%s)", goal.get("name"), goal.get("id"))
        return goal

    def update_goal(self, goal_id: str, data: dict) -> dict:
        self._log_operation("update_goal", goal_id=goal_id)
        return self.client.put(f"/goal/{goal_id}", data)["goal"]

    def delete_goal(self, goal_id: str) -> None:
        self._log_operation("delete_goal", goal_id=goal_id)
        self.client.delete(f"/goal/{goal_id}")

    def create_key_result(self, goal_id: str, data: dict) -> dict:
        self._log_operation("create_key_result", goal_id=goal_id, name=data.get("name"))
        return self.client.post(f"/goal/{goal_id}/key_result", data)["key_result"]

    def update_key_result(self, key_result_id: str, data: dict) -> dict:
        self._log_operation("update_key_result", key_result_id=key_result_id)
        return self.client.put(f"/key_result/{key_result_id}", data)["key_result"]

    def delete_key_result(self, key_result_id: str) -> None:
        self._log_operation("delete_key_result", key_result_id=key_result_id)
        self.client.delete(f"/key_result/{key_result_id}")
