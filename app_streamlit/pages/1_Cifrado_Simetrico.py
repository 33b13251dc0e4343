# --------------------------------------------------------------
# File: 1_Cifrado_Simetrico.py
# Description: Formulario de cifrado y descifrado AES-256-GCM en Streamlit.
# --------------------------------------------------------------

import streamlit as st

from cryptoapi.services import dispatch


def show_response(response, success: str) -> None:
    """Muestra el resultado o el error de dominio devuelto por la fachada.

    Args:
        response (CommandResponse): Respuesta de ``dispatch``.
        success (str): Mensaje a mostrar cuando la llamada tiene éxito.
    """
    if response.ok:
        st.success(success)
        st.code(str(response.result))
    else:
        st.error(f"{response.error.kind.value}: {response.error.message}")


st.title("🔒 Cifrado simétrico")
st.caption("AES-256-GCM. No reutilices nunca el mismo nonce con la misma clave.")

encoding = st.radio(
    "Formato de clave y nonce",
    options=["text", "base64"],
    horizontal=True,
    help="`text`: 32 y 12 caracteres. `base64`: valores generados abajo.",
)

# Genera clave y nonce aleatorios en Base64.
if st.button("Generar clave y nonce"):
    st.session_state["aes_key"] = dispatch("aes_generate_key").result
    st.session_state["aes_nonce"] = dispatch("aes_generate_nonce").result
    st.info("Selecciona el formato `base64` para usarlos.")

key = st.text_input("Clave", key="aes_key", type="password")
nonce = st.text_input("Nonce", key="aes_nonce")

tab_enc, tab_dec = st.tabs(["Cifrar", "Descifrar"])

with tab_enc:
    plaintext = st.text_area("Texto en claro", key="aes_plaintext")
    if st.button("Cifrar", key="btn_aes_encrypt"):
        response = dispatch(
            "aes_encrypt",
            {"plaintext": plaintext, "key": key, "nonce": nonce, "key_encoding": encoding},
        )
        show_response(response, "Cifrado completado.")

with tab_dec:
    ciphertext = st.text_area("Criptograma (Base64)", key="aes_ciphertext")
    if st.button("Descifrar", key="btn_aes_decrypt"):
        response = dispatch(
            "aes_decrypt",
            {"ciphertext": ciphertext, "key": key, "nonce": nonce, "key_encoding": encoding},
        )
        show_response(response, "Descifrado completado.")
