#autenticacion/domain/entities.py

from dataclasses import asdict, dataclass
from typing import Optional

ROL_ADMIN = "admin"
ROL_ENTRENADOR = "entrenador"


@dataclass
class Identidad:
    id: str
    role: str  # 'admin' o 'entrenador'


@dataclass
class UsuarioAutenticado:
    id: str
    nombres: str
    apellidos: str


@dataclass
class ResultadoAutenticacion:
    success: bool
    user: Optional[UsuarioAutenticado] = None
    role: Optional[str] = None
    token: Optional[str] = None
    message: Optional[str] = None

    def to_dict(self) -> dict:
        if not self.success:
            return {"success": False, "message": self.message}
        return {
            "success": True,
            "user": asdict(self.user),
            "role": self.role,
            "token": self.token,
        }
