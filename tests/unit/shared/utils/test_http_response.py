import json

from flight_booking.shared.utils import api_response, error_response


class TestHttpResponse:
    def test_api_response(self):
        response = api_response(201, {"status": "success"})

        assert response["statusCode"] == 201
        assert response["headers"] == {"Content-Type": "application/json"}
        assert json.loads(response["body"]) == {"status": "success"}

    def test_error_response_includes_details(self):
        response = error_response(
            404, "BookingNotFoundException", "Booking with ID 9 not found.", id=9
        )

        assert response["statusCode"] == 404
        assert json.loads(response["body"]) == {
            "status": "error",
            "error": "BookingNotFoundException",
            "message": "Booking with ID 9 not found.",
            "id": 9,
        }
