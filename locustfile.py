from locust import HttpUser, task, constant

REVIEW_PAYLOAD = {
    "personal_info": {"age": 30, "gender": "male", "wake_time": "07:00", "sleep_time": "23:00"},
    "body_analysis": {"height_cm": 175, "current_weight_kg": 80, "target_weight_kg": 75, "target_timeline_weeks": 16},
    "workout_preferences": {"activity_level": "moderate", "primary_goals": ["weight_loss"]},
}


class FastAPIUser(HttpUser):
    wait_time = constant(0)

    @task
    def health(self):
        with self.client.get("/health", catch_response=True) as r:
            if r.status_code != 200:
                r.failure("Healthcheck failed")

    @task(3)
    def review(self):
        with self.client.post("/review", json=REVIEW_PAYLOAD, catch_response=True) as r:
            if r.status_code != 200:
                r.failure(f"Review failed with {r.status_code}")
