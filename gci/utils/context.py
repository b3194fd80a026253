"""
Utilidad: Contexto por request
Se pasa explícitamente a cada llamada hacia las APIs de la plataforma
"""
import time
import uuid
from dataclasses import dataclass, field

# Header que App Engine agrega a cada request: "TRACE_ID/SPAN_ID;o=1"
TRACE_HEADER = "X-Cloud-Trace-Context"


@dataclass(frozen=True)
class RequestContext:
    request_id: str
    deadline: float = field(default=0.0)

    @classmethod
    def create(cls, timeout, request_id=None):
        """Crea un contexto que vence en `timeout` segundos desde ahora"""
        return cls(
            request_id=request_id or uuid.uuid4().hex,
            deadline=time.monotonic() + float(timeout),
        )

    @classmethod
    def from_request(cls, request, timeout):
        """Crea el contexto a partir del request entrante de Flask"""
        trace = request.headers.get(TRACE_HEADER, "")
        request_id = trace.split("/", 1)[0].strip() or None
        return cls.create(timeout, request_id=request_id)

    def remaining(self) -> float:
        """Segundos que quedan antes del deadline (nunca negativo)"""
        return max(0.0, self.deadline - time.monotonic())

    @property
    def expired(self) -> bool:
        return self.remaining() <= 0
