# --------------------------------------------------------------
# File: Home.py
# Description: Define la página principal de Streamlit con el resumen del servicio.
# --------------------------------------------------------------

import streamlit as st

from cryptoapi.services import dispatch
from cryptocore.config import configure_logging

configure_logging()

# Configura los metadatos de la página principal de la aplicación.
st.set_page_config(page_title="Crypto Desk", page_icon="🔐", layout="centered")

# Presenta el nombre del producto y su propósito general.
st.title("🔐 Crypto Desk")
st.write(
    "Cifrado simétrico AES-256-GCM, cifrado RSA-OAEP y firmas Ed25519. "
    "Las claves no se guardan: cada operación recibe el material que necesita."
)

# Comprueba que el servicio de comandos responde.
response = dispatch("ping")
if response.ok:
    st.success(f"Servicio disponible ({response.result}).")
st.info("Usa las páginas **Cifrado simétrico** y **Cifrado asimétrico** del menú lateral.")
