import pytest

PATIENTS_URL = "/api/v1/patients"

test_patient_data = {
    "name": "Ann",
    "contact": "+1234567890"
}

class TestPatients:

    def test_seed_patient_is_listed(self, client):
        """Startup seeds a default patient into the empty table."""
        response = client.get(PATIENTS_URL)
        assert response.status_code == 200

        data = response.json()
        assert data == [{"id": 1, "name": "John Doe", "contact": "123456789"}]

    def test_create_patient(self, client):
        response = client.post(PATIENTS_URL, json={"name": "  Ann  "})
        assert response.status_code == 201

        data = response.json()
        assert data["id"] == 2
        assert data["name"] == "Ann"
        assert data["contact"] is None
        assert data["message"] == "Patient created successfully"

    @pytest.mark.parametrize("body", [{}, {"name": ""}, {"name": "   "}, {"name": 12}])
    def test_create_patient_invalid_name(self, client, body):
        response = client.post(PATIENTS_URL, json=body)
        assert response.status_code == 400

        data = response.json()
        assert data["message"] == "Invalid name"
        assert data["field"] == "name"

    def test_create_patient_without_body(self, client):
        response = client.post(PATIENTS_URL)
        assert response.status_code == 400
        assert response.json()["field"] == "name"

    def test_create_patient_invalid_contact(self, client):
        response = client.post(PATIENTS_URL, json={"name": "Ann", "contact": 555})
        assert response.status_code == 400
        assert response.json()["field"] == "contact"

    def test_get_patient(self, client):
        created = client.post(PATIENTS_URL, json=test_patient_data).json()

        response = client.get(f"{PATIENTS_URL}/{created['id']}")
        assert response.status_code == 200
        assert response.json() == {
            "id": created["id"],
            "name": "Ann",
            "contact": "+1234567890"
        }

    def test_get_missing_patient(self, client):
        response = client.get(f"{PATIENTS_URL}/999")
        assert response.status_code == 404
        assert response.json()["message"] == "Patient not found"

    @pytest.mark.parametrize("patient_id", ["abc", "0", "-1", "1.5"])
    def test_get_patient_bad_identity(self, client, patient_id):
        response = client.get(f"{PATIENTS_URL}/{patient_id}")
        assert response.status_code == 400
        assert response.json()["field"] == "patient_id"

    def test_update_patient(self, client):
        created = client.post(PATIENTS_URL, json=test_patient_data).json()

        response = client.put(
            f"{PATIENTS_URL}/{created['id']}",
            json={"name": "Jane Doe", "contact": "+9876543210"}
        )
        assert response.status_code == 200
        data = response.json()
        assert data["name"] == "Jane Doe"
        assert data["contact"] == "+9876543210"
        assert data["message"] == "Patient updated successfully"

        fetched = client.get(f"{PATIENTS_URL}/{created['id']}").json()
        assert fetched["name"] == "Jane Doe"

    def test_update_patient_requires_name(self, client):
        created = client.post(PATIENTS_URL, json=test_patient_data).json()

        response = client.put(f"{PATIENTS_URL}/{created['id']}", json={"contact": "1"})
        assert response.status_code == 400

    def test_update_missing_patient(self, client):
        response = client.put(f"{PATIENTS_URL}/999", json={"name": "Nobody"})
        assert response.status_code == 404

    def test_delete_patient(self, client):
        created = client.post(PATIENTS_URL, json=test_patient_data).json()

        response = client.delete(f"{PATIENTS_URL}/{created['id']}")
        assert response.status_code == 200
        assert response.json() == {
            "id": created["id"],
            "message": "Patient deleted successfully"
        }

        response = client.get(f"{PATIENTS_URL}/{created['id']}")
        assert response.status_code == 404

    def test_delete_missing_patient(self, client):
        response = client.delete(f"{PATIENTS_URL}/999")
        assert response.status_code == 404

    def test_delete_patient_with_appointments(self, client):
        """Patients with appointments are kept so no appointment is orphaned."""
        created = client.post(PATIENTS_URL, json=test_patient_data).json()
        client.post("/api/v1/appointments", json={
            "patient_id": created["id"],
            "appointment_date": "2025-08-20",
            "appointment_time": "14:30",
            "reason": "checkup"
        })

        response = client.delete(f"{PATIENTS_URL}/{created['id']}")
        assert response.status_code == 409
        assert response.json()["message"] == "Patient has scheduled appointments"

class TestPatientLimits:

    def test_get_patient_beyond_id_range(self, client):
        response = client.get(f"{PATIENTS_URL}/{2**64}")
        assert response.status_code == 404
        assert response.json()["message"] == "Patient not found"

    def test_delete_patient_beyond_id_range(self, client):
        response = client.delete(f"{PATIENTS_URL}/{2**64}")
        assert response.status_code == 404

    def test_name_too_long(self, client):
        response = client.post(PATIENTS_URL, json={"name": "a" * 256})
        assert response.status_code == 400
        assert response.json()["field"] == "name"

    def test_name_at_column_limit(self, client):
        response = client.post(PATIENTS_URL, json={"name": "a" * 255})
        assert response.status_code == 201

    def test_contact_too_long(self, client):
        response = client.post(PATIENTS_URL, json={"name": "Ann", "contact": "5" * 256})
        assert response.status_code == 400
        assert response.json()["field"] == "contact"
