from .signature_issuer import SignatureIssuer, decode_join_token

__all__ = ['SignatureIssuer', 'decode_join_token']
