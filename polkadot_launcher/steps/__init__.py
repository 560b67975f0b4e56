from .step_10_install_sdk import InstallSdkStep
from .step_20_install_chain_spec_builder import InstallChainSpecBuilderStep
from .step_30_install_omni_node import InstallOmniNodeStep
from .step_40_install_eth_rpc import InstallEthRpcStep
from .step_50_download_runtime import DownloadRuntimeStep
from .step_60_generate_chain_spec import GenerateChainSpecStep

__all__ = [
    "InstallSdkStep",
    "InstallChainSpecBuilderStep",
    "InstallOmniNodeStep",
    "InstallEthRpcStep",
    "DownloadRuntimeStep",
    "GenerateChainSpecStep",
]
