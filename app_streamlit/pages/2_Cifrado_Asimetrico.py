# --------------------------------------------------------------
# File: 2_Cifrado_Asimetrico.py
# Description: Formularios de RSA-OAEP y firmas Ed25519 en Streamlit.
# --------------------------------------------------------------

import streamlit as st

from cryptoapi.services import dispatch, get_service

st.title("🗝️ Cifrado asimétrico")
st.caption("RSA para cifrar y descifrar; Ed25519 para firmar y verificar.")


def show_error(response) -> None:
    st.error(f"{response.error.kind.value}: {response.error.message}")


# Sección RSA.
st.subheader("RSA-OAEP (SHA-256)")
bits = st.selectbox("Tamaño de clave (bits)", options=list(get_service().settings.rsa_allowed_bits))

if st.button("Generar par RSA"):
    # La búsqueda de primos puede tardar varios segundos.
    with st.spinner("Generando claves RSA..."):
        response = dispatch("rsa_generate_keypair", {"bits": bits})
    if response.ok:
        st.session_state["rsa_public"] = response.result.public_key
        st.session_state["rsa_private"] = response.result.private_key
        st.success("Par de claves RSA generado.")
    else:
        show_error(response)

rsa_public = st.text_area("Clave pública (Base64)", key="rsa_public")
rsa_private = st.text_area("Clave privada (Base64)", key="rsa_private")
rsa_plaintext = st.text_input("Texto en claro", key="rsa_plaintext")

# Un widget ya creado no admite cambios de estado; se aplican en la siguiente ejecución.
if "rsa_pending_ciphertext" in st.session_state:
    st.session_state["rsa_ciphertext"] = st.session_state.pop("rsa_pending_ciphertext")
rsa_ciphertext = st.text_area("Criptograma (Base64)", key="rsa_ciphertext")

col_enc, col_dec = st.columns(2)
with col_enc:
    if st.button("Cifrar con RSA"):
        response = dispatch("rsa_encrypt", {"plaintext": rsa_plaintext, "public_key": rsa_public})
        if response.ok:
            st.session_state["rsa_pending_ciphertext"] = response.result
            st.rerun()
        else:
            show_error(response)
with col_dec:
    if st.button("Descifrar con RSA"):
        response = dispatch(
            "rsa_decrypt",
            {"ciphertext": rsa_ciphertext, "private_key": rsa_private},
        )
        if response.ok:
            st.success(f"Texto recuperado: {response.result}")
        else:
            show_error(response)

st.divider()

# Sección Ed25519.
st.subheader("Ed25519")
if st.button("Generar par Ed25519"):
    response = dispatch("ed25519_generate_keypair")
    st.session_state["ed_public"] = response.result.public_key
    st.session_state["ed_private"] = response.result.private_key

ed_public = st.text_input("Clave pública (Base64)", key="ed_public")
ed_private = st.text_input("Clave privada (Base64)", key="ed_private", type="password")
ed_message = st.text_area("Mensaje", key="ed_message")
if "ed_pending_signature" in st.session_state:
    st.session_state["ed_signature"] = st.session_state.pop("ed_pending_signature")
ed_signature = st.text_input("Firma (Base64)", key="ed_signature")

col_sign, col_verify = st.columns(2)
with col_sign:
    if st.button("Firmar"):
        response = dispatch("ed25519_sign", {"message": ed_message, "private_key": ed_private})
        if response.ok:
            st.session_state["ed_pending_signature"] = response.result
            st.rerun()
        else:
            show_error(response)
with col_verify:
    if st.button("Verificar"):
        response = dispatch(
            "ed25519_verify",
            {"message": ed_message, "signature": ed_signature, "public_key": ed_public},
        )
        if not response.ok:
            show_error(response)
        elif response.result:
            st.success("Firma verificada.")
        else:
            st.warning("Firma no válida.")
