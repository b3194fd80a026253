"""
Modelo: Respuesta de /_/service_account
"""
from dataclasses import dataclass


@dataclass
class ServiceAccountResponse:
    success: bool
    service_account: str = ""

    @classmethod
    def failed(cls):
        return cls(success=False)

    def to_dict(self):
        if not self.success:
            return {"success": False}
        return {
            "success": True,
            "serviceAccount": self.service_account,
        }
