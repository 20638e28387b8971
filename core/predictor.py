import threading
from typing import Callable, Optional

from core.config import PREDICTION_LATENCY_SECONDS
from core.estimator import predict_turnaround
from core.schema import FlightResource, PredictionInput, PredictionResult

ResultCallback = Callable[[PredictionResult], None]
ErrorCallback = Callable[[Exception], None]


class PredictionScheduler:
    """
    Reports predictions after a fixed artificial latency.

    Every submit() bumps a generation counter and cancels the pending timer, so an
    older request can never deliver its result once a newer one has been issued.
    """

    def __init__(self, latency: Optional[float] = None):
        self.latency = PREDICTION_LATENCY_SECONDS if latency is None else latency
        self._generation = 0
        self._timer = None
        self._lock = threading.Lock()

    @property
    def pending(self) -> bool:
        with self._lock:
            return self._timer is not None

    @property
    def generation(self) -> int:
        return self._generation

    def submit(self, resource: FlightResource, prediction_input: PredictionInput,
               callback: ResultCallback, on_error: Optional[ErrorCallback] = None) -> int:
        with self._lock:
            self._generation += 1
            token = self._generation
            if self._timer is not None:
                self._timer.cancel()
            timer = threading.Timer(self.latency, self._complete,
                                    args=(token, resource, prediction_input, callback, on_error))
            timer.daemon = True
            self._timer = timer
        timer.start()
        return token

    def cancel(self) -> None:
        with self._lock:
            self._generation += 1
            if self._timer is not None:
                self._timer.cancel()
                self._timer = None

    def _complete(self, token: int, resource: FlightResource, prediction_input: PredictionInput,
                  callback: ResultCallback, on_error: Optional[ErrorCallback] = None) -> None:
        result, error = None, None
        try:
            result = predict_turnaround(resource, prediction_input)
        except Exception as e:
            error = e

        # The timer slot is released on success and failure alike
        with self._lock:
            if token != self._generation:
                return
            self._timer = None

        if error is not None:
            if on_error is None:
                raise error
            on_error(error)
            return
        callback(result)


def run_prediction(resource: FlightResource, prediction_input: PredictionInput,
                   latency: Optional[float] = None) -> PredictionResult:
    """
    Blocks for the simulated latency, then returns the prediction.

    Args:
        resource: The selected flight's readiness scores.
        prediction_input: Aircraft type and arrival delay.
        latency: Seconds to wait. Defaults to the configured latency.

    Returns:
        The PredictionResult.

    Raises:
        Whatever the estimator raised while computing the prediction.
    """
    scheduler = PredictionScheduler(latency)
    done = threading.Event()
    delivered = {}

    def _deliver(result: PredictionResult) -> None:
        delivered['result'] = result
        done.set()

    def _fail(error: Exception) -> None:
        delivered['error'] = error
        done.set()

    scheduler.submit(resource, prediction_input, _deliver, _fail)
    done.wait()
    if 'error' in delivered:
        raise delivered['error']
    return delivered['result']
