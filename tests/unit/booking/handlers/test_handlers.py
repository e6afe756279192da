import json
from unittest.mock import MagicMock


def _body(response: dict) -> dict:
    return json.loads(response["body"])


class TestCreateBookingHandler:
    def test_create_booking_returns_201(
        self, load_handler, api_event, lambda_context, seed, repositories
    ):
        handler = load_handler("create")
        event = api_event(
            body={
                "passenger_id": seed["passenger"].id.value,
                "flight_id": seed["upcoming"].id.value,
            }
        )

        response = handler.lambda_handler(event, lambda_context)

        assert response["statusCode"] == 201
        body = _body(response)
        assert body["status"] == "success"
        assert body["data"]["booking_id"] == 1
        assert body["data"]["passenger_name"] == "Taro Yamada"
        assert body["data"]["status"] == "CONFIRMED"
        assert body["data"]["flight"]["available_seats"] == 1

        _, flights, _ = repositories
        assert flights.find_by_id(seed["upcoming"].id).occupied_seats == 1

    def test_base64_encoded_body_is_decoded(
        self, load_handler, api_event, lambda_context, seed
    ):
        """isBase64Encoded の本文もデコードして検証する"""
        handler = load_handler("create")
        event = api_event(
            body={
                "passenger_id": seed["passenger"].id.value,
                "flight_id": seed["upcoming"].id.value,
            },
            base64_encoded=True,
        )

        response = handler.lambda_handler(event, lambda_context)

        assert response["statusCode"] == 201
        assert _body(response)["data"]["passenger_id"] == seed["passenger"].id.value

    def test_unknown_passenger_returns_404(
        self, load_handler, api_event, lambda_context, seed
    ):
        handler = load_handler("create")
        event = api_event(
            body={"passenger_id": 999, "flight_id": seed["upcoming"].id.value}
        )

        response = handler.lambda_handler(event, lambda_context)

        assert response["statusCode"] == 404
        assert _body(response) == {
            "status": "error",
            "error": "PassengerNotFoundException",
            "message": "Passenger with ID 999 not found.",
        }

    def test_departed_flight_returns_409(
        self, load_handler, api_event, lambda_context, seed
    ):
        handler = load_handler("create")
        event = api_event(
            body={
                "passenger_id": seed["passenger"].id.value,
                "flight_id": seed["departed"].id.value,
            }
        )

        response = handler.lambda_handler(event, lambda_context)

        assert response["statusCode"] == 409
        assert _body(response)["error"] == "FlightAlreadyDepartedException"

    def test_full_flight_returns_409(
        self, load_handler, api_event, lambda_context, seed
    ):
        handler = load_handler("create")
        event = api_event(
            body={
                "passenger_id": seed["passenger"].id.value,
                "flight_id": seed["upcoming"].id.value,
            }
        )
        handler.lambda_handler(event, lambda_context)
        handler.lambda_handler(event, lambda_context)

        response = handler.lambda_handler(event, lambda_context)

        assert response["statusCode"] == 409
        assert _body(response)["error"] == "FlightOverbookedException"

    def test_invalid_body_returns_400(self, load_handler, api_event, lambda_context):
        handler = load_handler("create")
        event = api_event(body={"passenger_id": 0})

        response = handler.lambda_handler(event, lambda_context)

        assert response["statusCode"] == 400
        body = _body(response)
        assert body["error"] == "ValidationError"
        fields = {tuple(error["loc"]) for error in body["errors"]}
        assert fields == {("passenger_id",), ("flight_id",)}

    def test_malformed_json_returns_400(self, load_handler, api_event, lambda_context):
        handler = load_handler("create")

        response = handler.lambda_handler(api_event(body="{not json"), lambda_context)

        assert response["statusCode"] == 400

    def test_missing_body_returns_400(self, load_handler, api_event, lambda_context):
        handler = load_handler("create")

        response = handler.lambda_handler(api_event(), lambda_context)

        assert response["statusCode"] == 400


class TestCancelBookingHandler:
    def _book(self, load_handler, api_event, lambda_context, seed):
        create = load_handler("create")
        response = create.lambda_handler(
            api_event(
                body={
                    "passenger_id": seed["passenger"].id.value,
                    "flight_id": seed["upcoming"].id.value,
                }
            ),
            lambda_context,
        )
        return _body(response)["data"]["booking_id"]

    def test_cancel_booking_returns_200(
        self, load_handler, api_event, lambda_context, seed, repositories
    ):
        booking_id = self._book(load_handler, api_event, lambda_context, seed)
        handler = load_handler("cancel")

        response = handler.lambda_handler(
            api_event(path_parameters={"booking_id": str(booking_id)}), lambda_context
        )

        assert response["statusCode"] == 200
        body = _body(response)
        assert body["data"]["status"] == "CANCELLED"
        assert body["data"]["flight"]["available_seats"] == 2

        _, flights, _ = repositories
        assert flights.find_by_id(seed["upcoming"].id).occupied_seats == 0

    def test_cancel_twice_returns_409(
        self, load_handler, api_event, lambda_context, seed
    ):
        booking_id = self._book(load_handler, api_event, lambda_context, seed)
        handler = load_handler("cancel")
        event = api_event(path_parameters={"booking_id": str(booking_id)})
        handler.lambda_handler(event, lambda_context)

        response = handler.lambda_handler(event, lambda_context)

        assert response["statusCode"] == 409
        assert _body(response)["error"] == "BookingAlreadyCancelledException"

    def test_unknown_booking_returns_404(
        self, load_handler, api_event, lambda_context
    ):
        handler = load_handler("cancel")

        response = handler.lambda_handler(
            api_event(path_parameters={"booking_id": "42"}), lambda_context
        )

        assert response["statusCode"] == 404
        assert _body(response)["message"] == "Booking with ID 42 not found."

    def test_non_numeric_booking_id_returns_400(
        self, load_handler, api_event, lambda_context
    ):
        handler = load_handler("cancel")

        response = handler.lambda_handler(
            api_event(path_parameters={"booking_id": "abc"}), lambda_context
        )

        assert response["statusCode"] == 400
        assert _body(response)["error"] == "ValidationError"


class TestListBookingsHandler:
    def test_list_bookings_returns_200(
        self, load_handler, api_event, lambda_context, seed
    ):
        create = load_handler("create")
        create.lambda_handler(
            api_event(
                body={
                    "passenger_id": seed["passenger"].id.value,
                    "flight_id": seed["upcoming"].id.value,
                }
            ),
            lambda_context,
        )
        handler = load_handler("list_bookings")

        response = handler.lambda_handler(api_event(), lambda_context)

        assert response["statusCode"] == 200
        body = _body(response)
        assert body["count"] == 1
        assert body["bookings"][0]["flight"]["flight_id"] == seed["upcoming"].id.value

    def test_list_bookings_empty(self, load_handler, api_event, lambda_context):
        handler = load_handler("list_bookings")

        response = handler.lambda_handler(api_event(), lambda_context)

        assert response["statusCode"] == 200
        assert _body(response) == {"status": "success", "bookings": [], "count": 0}

    def test_unexpected_error_returns_500(
        self, load_handler, api_event, lambda_context
    ):
        service = MagicMock()
        service.list_bookings.side_effect = RuntimeError("connection reset")
        handler = load_handler("list_bookings", service=service)

        response = handler.lambda_handler(api_event(), lambda_context)

        assert response["statusCode"] == 500
        assert _body(response) == {
            "status": "error",
            "error": "InternalServerError",
            "message": "Internal server error",
        }
