from typing import Optional

from pydantic import EmailStr, constr, model_validator

from verduleria.api.shared.schemas import CamelModel


class ClienteIn(CamelModel):
    """Schema de alta/edición de cliente"""
    razon_social: constr(strip_whitespace=True, min_length=1, max_length=150)
    cuit_dni: constr(strip_whitespace=True, min_length=1, max_length=20)
    telefono: Optional[constr(max_length=30)] = None
    direccion: constr(strip_whitespace=True, min_length=1, max_length=200)
    email: Optional[EmailStr] = None

    @model_validator(mode='before')
    @classmethod
    def normalize_empty_strings(cls, data):
        """Convierte strings vacíos en None para los campos opcionales."""
        if isinstance(data, dict):
            for campo in ("email", "telefono"):
                valor = data.get(campo)
                if isinstance(valor, str) and not valor.strip():
                    data[campo] = None
        return data


class ClienteOut(CamelModel):
    id: int
    razon_social: str
    cuit_dni: str
    telefono: Optional[str] = None
    direccion: str
    email: Optional[str] = None
