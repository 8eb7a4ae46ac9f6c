from flight_booking.flight.domain.entity import Flight
from flight_booking.shared.utils.logger import get_logger

logger = get_logger("flight-service")


class FlightInventory:
    """Seat capture and release for flights

    Each call touches a single flight. Callers running several writers against
    the same flight must serialise them per flight.
    """

    def reserve_seats(self, flight: Flight, count: int) -> bool:
        captured = flight.reserve_seats(count)
        if captured:
            logger.info(
                "Seats captured",
                extra={
                    "flight_id": str(flight.id),
                    "seats": count,
                    "available_seats": flight.available_seats,
                },
            )
        else:
            logger.info(
                "Not enough seats to capture",
                extra={
                    "flight_id": str(flight.id),
                    "seats": count,
                    "available_seats": flight.available_seats,
                },
            )
        return captured

    def release_seats(self, flight: Flight, count: int) -> None:
        flight.release_seats(count)
        logger.info(
            "Seats released",
            extra={
                "flight_id": str(flight.id),
                "seats": count,
                "available_seats": flight.available_seats,
            },
        )

    def is_full(self, flight: Flight) -> bool:
        return flight.is_full()
