"""Pydantic schemas for API request/response validation"""

from pydantic import BaseModel, ConfigDict, Field
from typing import Any, Dict, List, Optional


class BillInputRequest(BaseModel):
    """Request body for POST /v1/simulations"""

    # Any JSON value is accepted; coercion happens at the domain boundary
    nome: Any = Field(None, description="Client name")
    uc: Any = Field(None, description="Consumer unit id")
    distribuidora: Any = None
    mes_ref: Any = Field(None, description="Reference month, e.g. 12/2025")
    tipo_ligacao: Any = Field(None, description="mono | bi | tri")
    consumo_total_kwh: Any = None
    tarifa_te: Any = None
    tarifa_tusd: Any = None
    tarifa_bandeira_amarela: Any = None
    tarifa_bandeira_vermelha: Any = None
    iluminacao_publica: Any = None
    outros_itens_texto: Any = None


class IdentificationSchema(BaseModel):
    cliente: str
    uc: str
    distribuidora: str
    mes_referencia: str
    tipo_ligacao: str


class ConsumptionSchema(BaseModel):
    total: float
    minimo: float
    compensado: float


class LineItemSchema(BaseModel):
    """Single compensated tariff component"""

    descricao: str
    consumo: float
    tarifa: float
    valor: float


class SummarySchema(BaseModel):
    valor_credito_total: float
    economia_mensal_associado: float
    repasse_envecom: float
    reducao_percentual: float


class ComparisonSchema(BaseModel):
    fatura_atual: float
    novo_total_final: float


class ReportSchema(BaseModel):
    """Serialized CompensationReport"""

    identificacao: IdentificationSchema
    consumo: ConsumptionSchema
    itens_compensacao: List[LineItemSchema]
    resumo: SummarySchema
    comparativo: ComparisonSchema


class ProjectionPoint(BaseModel):
    mes: str
    acumulado: float


class SimulationResponse(BaseModel):
    """Response for POST /v1/simulations"""

    relatorio: ReportSchema
    projecao: List[ProjectionPoint]
    economia_anual: float
    view: Dict[str, Any]


class ExtractionRequest(BaseModel):
    """Request body for POST /v1/extractions"""

    model_config = ConfigDict(populate_by_name=True)

    base64: Optional[str] = Field(None, description="Base64-encoded bill image")
    mime_type: Optional[str] = Field(None, alias="mimeType")


class ExtractionResponse(BaseModel):
    """Partial bill record read from the image; unread fields are omitted"""

    nome: Optional[str] = None
    uc: Optional[str] = None
    distribuidora: Optional[str] = None
    mes_ref: Optional[str] = None
    tipo_ligacao: Optional[str] = None
    consumo_total_kwh: Optional[float] = None
    tarifa_te: Optional[float] = None
    tarifa_tusd: Optional[float] = None
    tarifa_bandeira_amarela: Optional[float] = None
    tarifa_bandeira_vermelha: Optional[float] = None
    iluminacao_publica: Optional[float] = None
    outros_itens_texto: Optional[str] = None
