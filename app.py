from __future__ import annotations
import pandas as pd
import streamlit as st
from zenhan.cli import PATTERN_HELP
from zenhan.convert import ConvOption
from zenhan.utils import convert_dataframe, to_excel_bytes

EXCEL_MIME = (
    "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet"
)

st.set_page_config(page_title="Zenhan Converter")
st.title("Excel 全角・半角変換")

uploaded = st.file_uploader("Excelを選択", type=["xlsx"])

if "df" not in st.session_state and uploaded:
    st.session_state.template_bytes = uploaded.getvalue()
    st.session_state.df = pd.read_excel(uploaded)

if "df" in st.session_state:
    df = st.session_state.df
    st.write("アップロードしたデータ:")
    st.dataframe(df.head())

    columns = st.multiselect("変換する列を選択", list(df.columns), key="columns")
    conv = st.selectbox(
        "変換方法を選択",
        list(PATTERN_HELP),
        format_func=lambda k: f"{k} ({PATTERN_HELP[k]})",
        key="conv",
    )
    if conv in ("h2z", "z2h"):
        ascii_ = st.checkbox("英字・記号", key="ascii")
        digit = st.checkbox("数字", key="digit")
        kana = st.checkbox("カタカナ", value=True, key="kana")
    else:
        ascii_ = digit = kana = False
    ignore = st.text_input("変換しない文字", key="ignore")

    if st.button("変換実行") and columns:
        progress = st.progress(0.0)

        def on_progress(done: int, total: int) -> None:
            progress.progress(done / total)

        option = ConvOption(ascii=ascii_, digit=digit, kana=kana, ignore=ignore)
        with st.spinner("変換中..."):
            out_df = convert_dataframe(df, columns, conv, option, on_progress)
        progress.empty()
        st.session_state.out_df = out_df
        st.session_state.out_conv = conv

if "out_df" in st.session_state:
    st.write("結果プレビュー:")
    st.dataframe(st.session_state.out_df.head())
    tmpl = st.session_state.get("template_bytes")
    bytes_data = to_excel_bytes(
        st.session_state.out_df,
        template_bytes=tmpl,
        sheet_name=st.session_state.get("out_conv"),
    )
    st.download_button(
        label="保存してダウンロード",
        data=bytes_data,
        file_name="変換結果.xlsx",
        mime=EXCEL_MIME,
    )
