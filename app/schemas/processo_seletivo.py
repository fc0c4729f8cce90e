from pydantic import Field, model_validator
from app.schemas.base import CamelModel, UtcDateTime


class ProcessoSeletivoBase(CamelModel):
    nome: str = Field(..., min_length=1, max_length=200)
    data_inicio: UtcDateTime
    data_termino: UtcDateTime


class ProcessoSeletivoCreate(ProcessoSeletivoBase):
    """Schema for creating or replacing a selection process"""

    @model_validator(mode="after")
    def check_period(self):
        if self.data_inicio > self.data_termino:
            raise ValueError("dataInicio must not be after dataTermino")
        return self


class ProcessoSeletivoResponse(ProcessoSeletivoBase):
    id: int
