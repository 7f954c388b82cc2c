"""scriptjson 기본 코덱 파라미터"""
CODEC_CONFIG = {
    "sort_keys": False,                    # object key 정렬 (OPT_SORT_KEYS)
    "indent": False,                       # 2-space pretty print (OPT_INDENT_2)
    "integral_float_limit": float(2**53),  # |x| < limit 인 정수형 float → JSON 정수
}
