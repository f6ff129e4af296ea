from reqid.generator import ReqIdGenerator, req_id_gen_factory
from reqid.utils.ids import REQUEST_ID_PREFIX, to_base36

__all__ = ["REQUEST_ID_PREFIX", "ReqIdGenerator", "req_id_gen_factory", "to_base36"]
