import gradio as gr

from json_flattener.constants import DEFAULT_CSV_SEPARATOR, ROOT_PATH
from json_flattener.handlers import (
    export_csv_handler,
    handle_entry_change,
    load_and_flatten_json,
    preview_csv_handler,
)

# --- UI Definition ---
with gr.Blocks(title="JSON Flattener") as demo:
    gr.Markdown("# JSON Flattener and CSV Denormalizer")
    gr.Markdown("Upload a JSON file, inspect its flat paths, and export nested arrays as CSV records.")

    # State
    document_state = gr.State()

    with gr.Row():
        # Left Panel: Input & Flat view
        with gr.Column(scale=1):
            gr.Markdown("### 1. Import")
            file_input = gr.File(label="Upload JSON File", file_types=[".json"])
            remove_nodes = gr.Checkbox(label="Remove {object} / {array} nodes", value=False)
            status_msg = gr.Textbox(label="Status", interactive=False)

            gr.Markdown("### 2. Flat view")
            flat_dump = gr.Textbox(label="Paths and values", lines=20, max_lines=40, interactive=False)

        # Right Panel: CSV Builder
        with gr.Column(scale=1):
            gr.Markdown("### 3. CSV Builder")
            entry_selector = gr.Dropdown(
                label="Entry Path (one record per element)",
                choices=[ROOT_PATH],
                value=ROOT_PATH,
                allow_custom_value=True,
                interactive=True,
            )
            row_count = gr.Textbox(label="Row Count", interactive=False)
            properties_input = gr.Textbox(
                label="Properties (one per line)",
                placeholder=".\nid\n../name",
                lines=5,
            )
            separator_input = gr.Textbox(label="Separator", value=DEFAULT_CSV_SEPARATOR, max_lines=1)

            gr.Markdown("### 4. Export")
            output_filename = gr.Textbox(label="Output Filename (optional)", placeholder="output")
            preview_btn = gr.Button("Load Preview")
            export_btn = gr.Button("Export CSV", variant="primary")
            download_output = gr.File(label="Download Result")
            csv_preview = gr.Textbox(label="Preview (first 20 rows)", lines=10, interactive=False)

    file_input.upload(
        fn=load_and_flatten_json,
        inputs=[file_input, remove_nodes],
        outputs=[document_state, status_msg, flat_dump, entry_selector, row_count],
    )

    remove_nodes.change(
        fn=load_and_flatten_json,
        inputs=[file_input, remove_nodes],
        outputs=[document_state, status_msg, flat_dump, entry_selector, row_count],
    )

    entry_selector.change(
        fn=handle_entry_change,
        inputs=[document_state, entry_selector],
        outputs=[row_count, csv_preview],
    )

    preview_btn.click(
        fn=preview_csv_handler,
        inputs=[document_state, entry_selector, properties_input, separator_input],
        outputs=[csv_preview],
    )

    export_btn.click(
        fn=export_csv_handler,
        inputs=[document_state, entry_selector, properties_input, separator_input, output_filename],
        outputs=[download_output, status_msg],
    )

if __name__ == "__main__":
    demo.launch()
