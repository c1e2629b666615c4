from prometheus_client import Counter, Histogram


class BookingMetrics:
    """
    Hotel Booking Metrics Collector

    Tracks booking requests per operation and their outcome
    (`success` or the lower-cased error kind).
    """

    def __init__(self):
        self.booking_requests = Counter(
            'booking_requests_total',
            'Total booking requests',
            ['operation', 'result'],  # operation: get/create/update
        )

        self.booking_duration = Histogram(
            'booking_request_duration_seconds',
            'Booking request processing time',
            ['operation'],
            buckets=[0.005, 0.01, 0.05, 0.1, 0.2, 0.5, 1.0, 2.0],
        )

    def record_booking_request(self, *, operation: str, result: str, duration: float):
        self.booking_requests.labels(operation=operation, result=result).inc()

        self.booking_duration.labels(operation=operation).observe(duration)


# Global metrics instance
metrics = BookingMetrics()
