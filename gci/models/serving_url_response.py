"""
Modelo: Respuesta de /_/serving_url
"""
from dataclasses import dataclass


@dataclass
class ServingURLResponse:
    success: bool
    serving_url: str = ""

    @classmethod
    def failed(cls):
        return cls(success=False)

    def to_dict(self):
        # Si falló, no se manda la URL
        if not self.success:
            return {"success": False}
        return {
            "success": True,
            "servingUrl": self.serving_url,
        }
