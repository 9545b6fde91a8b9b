from dataclasses import dataclass
from typing import TypeVar, Generic, Type, List, Optional, Any, Dict, Union, FrozenSet, Tuple
from sqlalchemy.orm import Session
from sqlalchemy import asc, desc, or_
from pydantic import BaseModel

# Tipo genérico para modelos SQLAlchemy
ModelType = TypeVar("ModelType")
# Tipo genérico para esquemas de criação Pydantic
CreateSchemaType = TypeVar("CreateSchemaType", bound=BaseModel)
# Tipo genérico para esquemas de atualização Pydantic
UpdateSchemaType = TypeVar("UpdateSchemaType", bound=BaseModel)

DEFAULT_PAGE = 1
DEFAULT_PAGE_SIZE = 10
MAX_PAGE_SIZE = 100
MAX_SEARCH_LENGTH = 255
# OFFSET precisa caber em um inteiro de 64 bits no banco
MAX_OFFSET = 2**63 - 1


@dataclass(frozen=True)
class PageParams:
    """Parâmetros de paginação já normalizados."""
    page: int
    page_size: int
    sort: str
    dir: str
    search: str

    @property
    def offset(self) -> int:
        return (self.page - 1) * self.page_size


@dataclass
class Page:
    rows: List[Any]
    total: int
    params: PageParams

    @property
    def total_pages(self) -> int:
        return (self.total + self.params.page_size - 1) // self.params.page_size

    def as_dict(self, data: List[Any]) -> Dict[str, Any]:
        return {
            "data": data,
            "page": self.params.page,
            "pageSize": self.params.page_size,
            "total": self.total,
            "totalPages": self.total_pages,
            "sort": self.params.sort,
            "dir": self.params.dir,
            "search": self.params.search,
        }


def _as_int(value: Union[int, str, None]) -> Optional[int]:
    if value is None:
        return None
    try:
        return int(str(value).strip())
    except ValueError:
        return None


def normalize_page_params(
    page: Union[int, str, None],
    page_size: Union[int, str, None],
    sort: Optional[str],
    dir: Optional[str],
    search: Optional[str],
    sort_whitelist: FrozenSet[str],
    default_sort: str = "created_at",
) -> PageParams:
    """
    Normaliza os parâmetros de listagem.

    Valores não numéricos ou fora do intervalo voltam ao padrão em vez de
    gerar erro; a coluna de ordenação só é aceita se estiver na lista permitida.
    """
    page = _as_int(page)
    page_size = _as_int(page_size)
    if page is None or page < 1:
        page = DEFAULT_PAGE
    if page_size is None or not (1 <= page_size <= MAX_PAGE_SIZE):
        page_size = DEFAULT_PAGE_SIZE
    if (page - 1) * page_size > MAX_OFFSET:
        page = DEFAULT_PAGE
    if sort not in sort_whitelist:
        sort = default_sort
    dir = "asc" if (dir or "").lower() == "asc" else "desc"
    search = (search or "").strip()[:MAX_SEARCH_LENGTH]
    return PageParams(page=page, page_size=page_size, sort=sort, dir=dir, search=search)


class BaseRepository(Generic[ModelType, CreateSchemaType, UpdateSchemaType]):
    """
    Repositório base com operações CRUD genéricas.

    Esta classe implementa operações básicas de CRUD (Create, Read, Update, Delete)
    e a listagem paginada com busca que podem ser reutilizadas por repositórios
    específicos.
    """

    # Colunas aceitas no parâmetro de ordenação
    sort_whitelist: FrozenSet[str] = frozenset({"id"})
    default_sort: str = "id"
    # Colunas pesquisadas com LIKE
    search_columns: Tuple[str, ...] = ()

    def __init__(self, model: Type[ModelType], db: Session):
        """
        Inicializa o repositório base.

        Args:
            model: Classe do modelo SQLAlchemy
            db: Sessão do banco de dados
        """
        self.model = model
        self.db = db

    def get(self, id: Any) -> Optional[ModelType]:
        """
        Obtém um registro pelo ID.

        Args:
            id: ID do registro

        Returns:
            Instância do modelo ou None se não encontrado
        """
        return self.db.get(self.model, id)

    def create(self, obj_in: Union[CreateSchemaType, Dict[str, Any]], **extra: Any) -> ModelType:
        """
        Cria um novo registro.

        Args:
            obj_in: Dados para criar o registro (esquema Pydantic ou dicionário)
            extra: Campos adicionais não presentes no esquema (ex.: created_by)

        Returns:
            Instância do modelo criado
        """
        obj_data = obj_in.model_dump() if hasattr(obj_in, "model_dump") else dict(obj_in)
        obj_data.update(extra)
        db_obj = self.model(**obj_data)
        self.db.add(db_obj)
        self.db.commit()
        self.db.refresh(db_obj)
        return db_obj

    def update(self, id: Any, obj_in: Union[UpdateSchemaType, Dict[str, Any]]) -> Optional[ModelType]:
        """
        Atualiza um registro existente.

        Returns:
            Instância do modelo atualizado ou None se não encontrado
        """
        db_obj = self.get(id)
        if not db_obj:
            return None

        obj_data = obj_in.model_dump(exclude_unset=True) if hasattr(obj_in, "model_dump") else obj_in

        for field, value in obj_data.items():
            if hasattr(db_obj, field):
                setattr(db_obj, field, value)

        self.db.add(db_obj)
        self.db.commit()
        self.db.refresh(db_obj)
        return db_obj

    def delete(self, id: Any) -> bool:
        """
        Remove um registro.

        Returns:
            True se o registro foi removido, False caso contrário
        """
        db_obj = self.get(id)
        if not db_obj:
            return False

        self.db.delete(db_obj)
        self.db.commit()
        return True

    def page_params(
        self,
        page: Union[int, str, None] = None,
        page_size: Union[int, str, None] = None,
        sort: Optional[str] = None,
        dir: Optional[str] = None,
        search: Optional[str] = None,
    ) -> PageParams:
        return normalize_page_params(
            page, page_size, sort, dir, search,
            sort_whitelist=self.sort_whitelist,
            default_sort=self.default_sort,
        )

    def paginate(self, params: PageParams) -> Page:
        """
        Lista registros paginados, com busca textual e ordenação.

        Args:
            params: Parâmetros já normalizados (ver page_params)

        Returns:
            Página com as linhas e o total de registros que atendem à busca
        """
        query = self.db.query(self.model)
        if params.search and self.search_columns:
            pattern = f"%{params.search}%"
            query = query.filter(
                or_(*(getattr(self.model, col).like(pattern) for col in self.search_columns))
            )
        total = query.count()

        column = getattr(self.model, params.sort)
        order = asc(column) if params.dir == "asc" else desc(column)
        rows = (
            query.order_by(order, desc(self.model.id))
            .offset(params.offset)
            .limit(params.page_size)
            .all()
        )
        return Page(rows=rows, total=total, params=params)
