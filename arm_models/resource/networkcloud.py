from datetime import datetime
from typing import Any, ClassVar, Dict, Optional, List

from attr import define, field

from arm_models.resource.base import (
    AzureExtendedLocation,
    AzureModel,
    AzurePagedList,
    AzureTrackedResource,
    ExtensibleEnum,
)
from armlib.json_bender import Bender, S, Bend, ForallBend

service_name = "networkcloud"


# region enums


class AgentPoolDetailedStatus(ExtensibleEnum):
    AVAILABLE = "Available"
    ERROR = "Error"
    PROVISIONING = "Provisioning"


class AgentPoolMode(ExtensibleEnum):
    SYSTEM = "System"
    USER = "User"
    NOT_APPLICABLE = "NotApplicable"


class AgentPoolProvisioningState(ExtensibleEnum):
    ACCEPTED = "Accepted"
    CANCELED = "Canceled"
    DELETING = "Deleting"
    FAILED = "Failed"
    IN_PROGRESS = "InProgress"
    SUCCEEDED = "Succeeded"
    UPDATING = "Updating"


class AvailabilityLifecycle(ExtensibleEnum):
    PREVIEW = "Preview"
    GENERALLY_AVAILABLE = "GenerallyAvailable"


class BareMetalMachineCordonStatus(ExtensibleEnum):
    CORDONED = "Cordoned"
    UNCORDONED = "Uncordoned"


class BareMetalMachineDetailedStatus(ExtensibleEnum):
    PREPARING = "Preparing"
    ERROR = "Error"
    AVAILABLE = "Available"
    PROVISIONING = "Provisioning"
    PROVISIONED = "Provisioned"
    DEPROVISIONING = "Deprovisioning"


class BareMetalMachineHardwareValidationResult(ExtensibleEnum):
    PASS = "Pass"
    FAIL = "Fail"


class BareMetalMachinePowerState(ExtensibleEnum):
    ON = "On"
    OFF = "Off"


class BareMetalMachineProvisioningState(ExtensibleEnum):
    SUCCEEDED = "Succeeded"
    FAILED = "Failed"
    CANCELED = "Canceled"
    PROVISIONING = "Provisioning"
    ACCEPTED = "Accepted"


class BareMetalMachineReadyState(ExtensibleEnum):
    TRUE = "True"
    FALSE = "False"


class ClusterConnectionStatus(ExtensibleEnum):
    CONNECTED = "Connected"
    DISCONNECTED = "Disconnected"
    TIMEOUT = "Timeout"
    UNDEFINED = "Undefined"


class ClusterDetailedStatus(ExtensibleEnum):
    PENDING_DEPLOYMENT = "PendingDeployment"
    DEPLOYING = "Deploying"
    RUNNING = "Running"
    UPDATING = "Updating"
    DEGRADED = "Degraded"
    DELETING = "Deleting"
    DISCONNECTED = "Disconnected"
    FAILED = "Failed"


class ClusterManagerConnectionStatus(ExtensibleEnum):
    CONNECTED = "Connected"
    UNREACHABLE = "Unreachable"


class ClusterProvisioningState(ExtensibleEnum):
    SUCCEEDED = "Succeeded"
    FAILED = "Failed"
    CANCELED = "Canceled"
    ACCEPTED = "Accepted"
    VALIDATING = "Validating"
    UPDATING = "Updating"


class ClusterType(ExtensibleEnum):
    SINGLE_RACK = "SingleRack"
    MULTI_RACK = "MultiRack"


class ControlImpact(ExtensibleEnum):
    TRUE = "True"
    FALSE = "False"


class DefaultGateway(ExtensibleEnum):
    TRUE = "True"
    FALSE = "False"


class FeatureDetailedStatus(ExtensibleEnum):
    RUNNING = "Running"
    FAILED = "Failed"
    UNKNOWN = "Unknown"


class HugepagesSize(ExtensibleEnum):
    SIZE_2M = "2M"
    SIZE_1G = "1G"


class HybridAksIpamEnabled(ExtensibleEnum):
    TRUE = "True"
    FALSE = "False"


class HybridAksPluginType(ExtensibleEnum):
    DPDK = "DPDK"
    SRIOV = "SRIOV"
    OS_DEVICE = "OSDevice"


class IpAllocationType(ExtensibleEnum):
    IPV4 = "IPV4"
    IPV6 = "IPV6"
    DUAL_STACK = "DualStack"


class KubernetesClusterDetailedStatus(ExtensibleEnum):
    AVAILABLE = "Available"
    ERROR = "Error"
    PROVISIONING = "Provisioning"


class KubernetesClusterNodeDetailedStatus(ExtensibleEnum):
    AVAILABLE = "Available"
    ERROR = "Error"
    PROVISIONING = "Provisioning"
    RUNNING = "Running"
    SCHEDULING = "Scheduling"
    STOPPED = "Stopped"
    TERMINATED = "Terminated"
    UNKNOWN = "Unknown"


class KubernetesClusterProvisioningState(ExtensibleEnum):
    SUCCEEDED = "Succeeded"
    FAILED = "Failed"
    CANCELED = "Canceled"
    ACCEPTED = "Accepted"
    IN_PROGRESS = "InProgress"
    CREATED = "Created"
    UPDATING = "Updating"
    DELETING = "Deleting"


class KubernetesNodePowerState(ExtensibleEnum):
    ON = "On"
    OFF = "Off"
    UNKNOWN = "Unknown"


class KubernetesNodeRole(ExtensibleEnum):
    CONTROL_PLANE = "ControlPlane"
    WORKER = "Worker"


class KubernetesPluginType(ExtensibleEnum):
    DPDK = "DPDK"
    SRIOV = "SRIOV"
    OS_DEVICE = "OSDevice"
    MACVLAN = "MACVLAN"
    IPVLAN = "IPVLAN"


class L3NetworkConfigurationIpamEnabled(ExtensibleEnum):
    TRUE = "True"
    FALSE = "False"


class L3NetworkDetailedStatus(ExtensibleEnum):
    ERROR = "Error"
    AVAILABLE = "Available"
    PROVISIONING = "Provisioning"


class L3NetworkProvisioningState(ExtensibleEnum):
    SUCCEEDED = "Succeeded"
    FAILED = "Failed"
    CANCELED = "Canceled"
    PROVISIONING = "Provisioning"
    ACCEPTED = "Accepted"


class OsDiskCreateOption(ExtensibleEnum):
    EPHEMERAL = "Ephemeral"


class OsDiskDeleteOption(ExtensibleEnum):
    DELETE = "Delete"


class ValidationThresholdGrouping(ExtensibleEnum):
    PER_CLUSTER = "PerCluster"
    PER_RACK = "PerRack"


class ValidationThresholdType(ExtensibleEnum):
    COUNT_SUCCESS = "CountSuccess"
    PERCENT_SUCCESS = "PercentSuccess"


class VirtualMachineBootMethod(ExtensibleEnum):
    UEFI = "UEFI"
    BIOS = "BIOS"


class VirtualMachineDetailedStatus(ExtensibleEnum):
    AVAILABLE = "Available"
    ERROR = "Error"
    PROVISIONING = "Provisioning"
    RUNNING = "Running"
    SCHEDULING = "Scheduling"
    STOPPED = "Stopped"
    TERMINATED = "Terminated"
    UNKNOWN = "Unknown"


class VirtualMachineDeviceModelType(ExtensibleEnum):
    T1 = "T1"
    T2 = "T2"


class VirtualMachineIpAllocationMethod(ExtensibleEnum):
    DYNAMIC = "Dynamic"
    STATIC = "Static"
    DISABLED = "Disabled"


class VirtualMachineIsolateEmulatorThread(ExtensibleEnum):
    TRUE = "True"
    FALSE = "False"


class VirtualMachinePlacementHintPodAffinityScope(ExtensibleEnum):
    RACK = "Rack"
    MACHINE = "Machine"


class VirtualMachinePlacementHintType(ExtensibleEnum):
    AFFINITY = "Affinity"
    ANTI_AFFINITY = "AntiAffinity"


class VirtualMachinePowerState(ExtensibleEnum):
    ON = "On"
    OFF = "Off"
    UNKNOWN = "Unknown"


class VirtualMachineProvisioningState(ExtensibleEnum):
    SUCCEEDED = "Succeeded"
    FAILED = "Failed"
    CANCELED = "Canceled"
    PROVISIONING = "Provisioning"
    ACCEPTED = "Accepted"


class VirtualMachineSchedulingExecution(ExtensibleEnum):
    HARD = "Hard"
    SOFT = "Soft"


class VirtualMachineVirtioInterfaceType(ExtensibleEnum):
    MODERN = "Modern"
    TRANSITIONAL = "Transitional"


class WorkloadImpact(ExtensibleEnum):
    TRUE = "True"
    FALSE = "False"


# endregion

# region shared types


@define(slots=False, kw_only=True)
class AzureAdministrativeCredentials(AzureModel):
    kind: ClassVar[str] = "azure_administrative_credentials"
    mapping: ClassVar[Dict[str, Bender]] = {"password": S("password"), "username": S("username")}
    password: str = field(metadata={"description": "The password of the administrator of the device used during initialization."})  # fmt: skip
    username: str = field(metadata={"description": "The username of the administrator of the device used during initialization."})  # fmt: skip


@define(slots=False, kw_only=True)
class AzureSshPublicKey(AzureModel):
    kind: ClassVar[str] = "azure_ssh_public_key"
    mapping: ClassVar[Dict[str, Bender]] = {"key_data": S("keyData")}
    key_data: str = field(metadata={"description": "The SSH public key data."})


@define(slots=False, kw_only=True)
class AzureAdministratorConfiguration(AzureModel):
    kind: ClassVar[str] = "azure_administrator_configuration"
    mapping: ClassVar[Dict[str, Bender]] = {
        "admin_username": S("adminUsername"),
        "ssh_public_keys": S("sshPublicKeys") >> ForallBend(AzureSshPublicKey.mapping),
    }
    admin_username: Optional[str] = field(default=None, metadata={'description': 'The user name for the administrator that will be applied to the operating systems that run Kubernetes nodes.'})  # fmt: skip
    ssh_public_keys: List[AzureSshPublicKey] = field(factory=list, metadata={'description': 'SshPublicKey represents the public key used to authenticate with a resource through SSH.'})  # fmt: skip


@define(slots=False, kw_only=True)
class AzureKubernetesLabel(AzureModel):
    kind: ClassVar[str] = "azure_kubernetes_label"
    mapping: ClassVar[Dict[str, Bender]] = {"key": S("name"), "value": S("value")}
    key: str = field(metadata={"description": "The name of the label or taint."})
    value: str = field(metadata={"description": "The value of the label or taint."})


@define(slots=False, kw_only=True)
class AzureNetworkAttachment(AzureModel):
    kind: ClassVar[str] = "azure_network_attachment"
    mapping: ClassVar[Dict[str, Bender]] = {
        "attached_network_id": S("attachedNetworkId"),
        "default_gateway": S("defaultGateway"),
        "ip_allocation_method": S("ipAllocationMethod"),
        "ipv4_address": S("ipv4Address"),
        "ipv6_address": S("ipv6Address"),
        "mac_address": S("macAddress"),
        "network_attachment_name": S("networkAttachmentName"),
    }
    attached_network_id: str = field(metadata={'description': 'The resource ID of the associated network attached to the virtual machine.'})  # fmt: skip
    default_gateway: Optional[DefaultGateway] = field(default=None, metadata={'description': 'The indicator of whether this is the default gateway.'})  # fmt: skip
    ip_allocation_method: VirtualMachineIpAllocationMethod = field(metadata={'description': 'The IP allocation mechanism for the virtual machine.'})  # fmt: skip
    ipv4_address: Optional[str] = field(default=None, metadata={'description': 'The IPv4 address of the virtual machine.'})  # fmt: skip
    ipv6_address: Optional[str] = field(default=None, metadata={'description': 'The IPv6 address of the virtual machine.'})  # fmt: skip
    mac_address: Optional[str] = field(default=None, metadata={'description': 'The MAC address of the interface for the virtual machine that corresponds to this network attachment.'})  # fmt: skip
    network_attachment_name: Optional[str] = field(default=None, metadata={'description': 'The associated network name, used as the interface name inside the virtual machine.'})  # fmt: skip


@define(slots=False, kw_only=True)
class AzureManagedResourceGroupConfiguration(AzureModel):
    kind: ClassVar[str] = "azure_managed_resource_group_configuration"
    mapping: ClassVar[Dict[str, Bender]] = {"location": S("location"), "name": S("name")}
    location: Optional[str] = field(default=None, metadata={"description": "The location of the managed resource group."})  # fmt: skip
    name: Optional[str] = field(default=None, metadata={"description": "The name for the managed resource group."})


# endregion

# region bare metal machine


@define(slots=False, kw_only=True)
class AzureHardwareInventoryNetworkInterface(AzureModel):
    kind: ClassVar[str] = "azure_hardware_inventory_network_interface"
    mapping: ClassVar[Dict[str, Bender]] = {
        "link_status": S("linkStatus"),
        "mac_address": S("macAddress"),
        "name": S("name"),
        "network_interface_id": S("networkInterfaceId"),
    }
    link_status: Optional[str] = field(default=None, metadata={"description": "The current status of the link."})
    mac_address: Optional[str] = field(default=None, metadata={"description": "The MAC address associated with this interface."})  # fmt: skip
    name: Optional[str] = field(default=None, metadata={"description": "The name of the interface."})
    network_interface_id: Optional[str] = field(default=None, metadata={'description': 'The resource ID of the network interface for the port on the switch that this machine s interface is connected to.'})  # fmt: skip


@define(slots=False, kw_only=True)
class AzureHardwareInventory(AzureModel):
    kind: ClassVar[str] = "azure_hardware_inventory"
    mapping: ClassVar[Dict[str, Bender]] = {
        "additional_host_information": S("additionalHostInformation"),
        "interfaces": S("interfaces") >> ForallBend(AzureHardwareInventoryNetworkInterface.mapping),
    }
    additional_host_information: Optional[str] = field(default=None, metadata={'description': 'Freeform data extracted from the environment about this machine.'})  # fmt: skip
    interfaces: List[AzureHardwareInventoryNetworkInterface] = field(factory=list, metadata={'description': 'The list of network interfaces and associated details for the bare metal machine.'})  # fmt: skip


@define(slots=False, kw_only=True)
class AzureHardwareValidationStatus(AzureModel):
    kind: ClassVar[str] = "azure_hardware_validation_status"
    mapping: ClassVar[Dict[str, Bender]] = {
        "last_validation_time": S("lastValidationTime"),
        "result": S("result"),
    }
    last_validation_time: Optional[datetime] = field(default=None, metadata={'description': 'The timestamp of the hardware validation execution.'})  # fmt: skip
    result: Optional[BareMetalMachineHardwareValidationResult] = field(default=None, metadata={'description': 'The outcome of the hardware validation.'})  # fmt: skip


@define(slots=False, kw_only=True)
class AzureBareMetalMachineProperties(AzureModel):
    kind: ClassVar[str] = "azure_bare_metal_machine_properties"
    mapping: ClassVar[Dict[str, Bender]] = {
        "associated_resource_ids": S("associatedResourceIds"),
        "bmc_connection_string": S("bmcConnectionString"),
        "bmc_credentials": S("bmcCredentials") >> Bend(AzureAdministrativeCredentials.mapping),
        "bmc_mac_address": S("bmcMacAddress"),
        "boot_mac_address": S("bootMacAddress"),
        "cluster_id": S("clusterId"),
        "cordon_status": S("cordonStatus"),
        "detailed_status": S("detailedStatus"),
        "detailed_status_message": S("detailedStatusMessage"),
        "hardware_inventory": S("hardwareInventory") >> Bend(AzureHardwareInventory.mapping),
        "hardware_validation_status": S("hardwareValidationStatus") >> Bend(AzureHardwareValidationStatus.mapping),
        "hybrid_aks_clusters_associated_ids": S("hybridAksClustersAssociatedIds"),
        "kubernetes_node_name": S("kubernetesNodeName"),
        "kubernetes_version": S("kubernetesVersion"),
        "machine_details": S("machineDetails"),
        "machine_name": S("machineName"),
        "machine_roles": S("machineRoles"),
        "machine_sku_id": S("machineSkuId"),
        "oam_ipv4_address": S("oamIpv4Address"),
        "oam_ipv6_address": S("oamIpv6Address"),
        "os_image": S("osImage"),
        "power_state": S("powerState"),
        "provisioning_state": S("provisioningState"),
        "rack_id": S("rackId"),
        "rack_slot": S("rackSlot"),
        "ready_state": S("readyState"),
        "serial_number": S("serialNumber"),
        "service_tag": S("serviceTag"),
        "virtual_machines_associated_ids": S("virtualMachinesAssociatedIds"),
    }
    associated_resource_ids: List[str] = field(factory=list, metadata={'description': 'The list of resource IDs for the other Microsoft.NetworkCloud resources that have attached this network.'})  # fmt: skip
    bmc_connection_string: str = field(metadata={'description': 'The connection string for the baseboard management controller including IP address and protocol.'})  # fmt: skip
    bmc_credentials: AzureAdministrativeCredentials = field(metadata={'description': 'The credentials of the baseboard management controller on this bare metal machine.'})  # fmt: skip
    bmc_mac_address: str = field(metadata={'description': 'The MAC address of the BMC device.'})  # fmt: skip
    boot_mac_address: str = field(metadata={'description': 'The MAC address of a NIC connected to the PXE network.'})  # fmt: skip
    cluster_id: Optional[str] = field(default=None, metadata={'description': 'The resource ID of the cluster this bare metal machine is associated with.'})  # fmt: skip
    cordon_status: Optional[BareMetalMachineCordonStatus] = field(default=None, metadata={'description': 'The cordon status of the bare metal machine.'})  # fmt: skip
    detailed_status: Optional[BareMetalMachineDetailedStatus] = field(default=None, metadata={'description': 'The more detailed status of the bare metal machine.'})  # fmt: skip
    detailed_status_message: Optional[str] = field(default=None, metadata={'description': 'The descriptive message about the current detailed status.'})  # fmt: skip
    hardware_inventory: Optional[AzureHardwareInventory] = field(default=None, metadata={'description': 'Hardware inventory, including information acquired from the model/sku information and from the ironic inspector.'})  # fmt: skip
    hardware_validation_status: Optional[AzureHardwareValidationStatus] = field(default=None, metadata={'description': 'The details of the latest hardware validation performed for this bare metal machine.'})  # fmt: skip
    hybrid_aks_clusters_associated_ids: List[str] = field(factory=list, metadata={'description': 'Field Deprecated. These fields will be empty/omitted. The list of the resource IDs for the HybridAksClusters that have nodes hosted on this bare metal machine.', 'deprecated': True})  # fmt: skip
    kubernetes_node_name: Optional[str] = field(default=None, metadata={'description': 'The name of this machine represented by the host object in the Cluster s Kubernetes control plane.'})  # fmt: skip
    kubernetes_version: Optional[str] = field(default=None, metadata={'description': 'The version of Kubernetes running on this machine.'})  # fmt: skip
    machine_details: str = field(metadata={'description': 'The custom details provided by the customer.'})  # fmt: skip
    machine_name: str = field(metadata={'description': 'The OS-level hostname assigned to this machine.'})  # fmt: skip
    machine_roles: List[str] = field(factory=list, metadata={'description': 'The list of roles that are assigned to the cluster node running on this machine.'})  # fmt: skip
    machine_sku_id: str = field(metadata={'description': 'The unique internal identifier of the bare metal machine SKU.'})  # fmt: skip
    oam_ipv4_address: Optional[str] = field(default=None, metadata={'description': 'The IPv4 address that is assigned to the bare metal machine during the cluster deployment.'})  # fmt: skip
    oam_ipv6_address: Optional[str] = field(default=None, metadata={'description': 'The IPv6 address that is assigned to the bare metal machine during the cluster deployment.'})  # fmt: skip
    os_image: Optional[str] = field(default=None, metadata={'description': 'The image that is currently provisioned to the OS disk.'})  # fmt: skip
    power_state: Optional[BareMetalMachinePowerState] = field(default=None, metadata={'description': 'The power state derived from the baseboard management controller.'})  # fmt: skip
    provisioning_state: Optional[BareMetalMachineProvisioningState] = field(default=None, metadata={'description': 'The provisioning state of the bare metal machine.'})  # fmt: skip
    rack_id: str = field(metadata={'description': 'The resource ID of the rack where this bare metal machine resides.'})  # fmt: skip
    rack_slot: int = field(metadata={'description': 'The rack slot in which this bare metal machine is located, ordered from the bottom up i.e. the lowest slot is 1.'})  # fmt: skip
    ready_state: Optional[BareMetalMachineReadyState] = field(default=None, metadata={'description': 'The indicator of whether the bare metal machine is ready to receive workloads.'})  # fmt: skip
    serial_number: str = field(metadata={"description": "The serial number of the bare metal machine."})
    service_tag: Optional[str] = field(default=None, metadata={'description': 'The discovered value of the machine s service tag.'})  # fmt: skip
    virtual_machines_associated_ids: List[str] = field(factory=list, metadata={'description': 'Field Deprecated. These fields will be empty/omitted. The list of the resource IDs for the VirtualMachines that are hosted on this bare metal machine.', 'deprecated': True})  # fmt: skip


@define(slots=False, kw_only=True)
class AzureNetworkCloudBareMetalMachine(AzureTrackedResource):
    kind: ClassVar[str] = "azure_network_cloud_bare_metal_machine"
    mapping: ClassVar[Dict[str, Bender]] = AzureTrackedResource.mapping | {
        "extended_location": S("extendedLocation") >> Bend(AzureExtendedLocation.mapping),
        "properties": S("properties") >> Bend(AzureBareMetalMachineProperties.mapping),
    }
    extended_location: AzureExtendedLocation = field(metadata={'description': 'The extended location of the cluster associated with the resource.'})  # fmt: skip
    properties: AzureBareMetalMachineProperties = field(metadata={'description': 'The list of the resource properties.'})  # fmt: skip


@define(slots=False, kw_only=True)
class AzureNetworkCloudBareMetalMachineList(AzurePagedList):
    kind: ClassVar[str] = "azure_network_cloud_bare_metal_machine_list"
    mapping: ClassVar[Dict[str, Bender]] = AzurePagedList.mapping | {
        "value": S("value") >> ForallBend(AzureNetworkCloudBareMetalMachine.mapping),
    }
    value: List[AzureNetworkCloudBareMetalMachine] = field(factory=list, metadata={'description': 'The list of bare metal machines.'})  # fmt: skip


@define(slots=False, kw_only=True)
class AzureBareMetalMachinePatchProperties(AzureModel):
    kind: ClassVar[str] = "azure_bare_metal_machine_patch_properties"
    mapping: ClassVar[Dict[str, Bender]] = {"machine_details": S("machineDetails")}
    machine_details: Optional[str] = field(default=None, metadata={'description': 'The details provided by the customer during the creation of rack manifests that allows for custom data to be associated with this machine.'})  # fmt: skip


@define(slots=False, kw_only=True)
class AzureNetworkCloudBareMetalMachinePatchParameters(AzureModel):
    kind: ClassVar[str] = "azure_network_cloud_bare_metal_machine_patch_parameters"
    mapping: ClassVar[Dict[str, Bender]] = {
        "properties": S("properties") >> Bend(AzureBareMetalMachinePatchProperties.mapping),
        "tags": S("tags"),
    }
    properties: Optional[AzureBareMetalMachinePatchProperties] = field(default=None, metadata={'description': 'The list of the resource properties.'})  # fmt: skip
    tags: Dict[str, Any] = field(factory=dict, metadata={"description": "The Azure resource tags that will replace the existing ones."})  # fmt: skip


# endregion

# region cluster


@define(slots=False, kw_only=True)
class AzureBareMetalMachineConfigurationData(AzureModel):
    kind: ClassVar[str] = "azure_bare_metal_machine_configuration_data"
    mapping: ClassVar[Dict[str, Bender]] = {
        "bmc_connection_string": S("bmcConnectionString"),
        "bmc_credentials": S("bmcCredentials") >> Bend(AzureAdministrativeCredentials.mapping),
        "bmc_mac_address": S("bmcMacAddress"),
        "boot_mac_address": S("bootMacAddress"),
        "machine_details": S("machineDetails"),
        "machine_name": S("machineName"),
        "rack_slot": S("rackSlot"),
        "serial_number": S("serialNumber"),
    }
    bmc_connection_string: Optional[str] = field(default=None, metadata={'description': 'The connection string for the baseboard management controller including IP address and protocol.'})  # fmt: skip
    bmc_credentials: AzureAdministrativeCredentials = field(metadata={'description': 'The credentials of the baseboard management controller on this bare metal machine.'})  # fmt: skip
    bmc_mac_address: str = field(metadata={"description": "The MAC address of the BMC for this machine."})
    boot_mac_address: str = field(metadata={'description': 'The MAC address associated with the PXE NIC card.'})  # fmt: skip
    machine_details: Optional[str] = field(default=None, metadata={'description': 'The free-form additional information about the machine, e.g. an asset tag.'})  # fmt: skip
    machine_name: Optional[str] = field(default=None, metadata={'description': 'The user-provided name for the bare metal machine created from this specification.'})  # fmt: skip
    rack_slot: int = field(metadata={'description': 'The slot the physical machine is in the rack based on the BOM configuration.'})  # fmt: skip
    serial_number: str = field(metadata={"description": "The serial number of the machine."})


@define(slots=False, kw_only=True)
class AzureStorageApplianceConfigurationData(AzureModel):
    kind: ClassVar[str] = "azure_storage_appliance_configuration_data"
    mapping: ClassVar[Dict[str, Bender]] = {
        "admin_credentials": S("adminCredentials") >> Bend(AzureAdministrativeCredentials.mapping),
        "rack_slot": S("rackSlot"),
        "serial_number": S("serialNumber"),
        "storage_appliance_name": S("storageApplianceName"),
    }
    admin_credentials: AzureAdministrativeCredentials = field(metadata={'description': 'The credentials of the administrative interface on this storage appliance.'})  # fmt: skip
    rack_slot: int = field(metadata={"description": "The slot that storage appliance is in the rack based on the BOM configuration."})  # fmt: skip
    serial_number: str = field(metadata={"description": "The serial number of the appliance."})
    storage_appliance_name: Optional[str] = field(default=None, metadata={'description': 'The user-provided name for the storage appliance that will be created from this specification.'})  # fmt: skip


@define(slots=False, kw_only=True)
class AzureRackDefinition(AzureModel):
    kind: ClassVar[str] = "azure_rack_definition"
    mapping: ClassVar[Dict[str, Bender]] = {
        "availability_zone": S("availabilityZone"),
        "bare_metal_machine_configuration_data": S("bareMetalMachineConfigurationData")
        >> ForallBend(AzureBareMetalMachineConfigurationData.mapping),
        "network_rack_id": S("networkRackId"),
        "rack_location": S("rackLocation"),
        "rack_serial_number": S("rackSerialNumber"),
        "rack_sku_id": S("rackSkuId"),
        "storage_appliance_configuration_data": S("storageApplianceConfigurationData")
        >> ForallBend(AzureStorageApplianceConfigurationData.mapping),
    }
    availability_zone: Optional[str] = field(default=None, metadata={'description': 'The zone name used for this rack when created. Availability zones are used for workload placement.'})  # fmt: skip
    bare_metal_machine_configuration_data: List[AzureBareMetalMachineConfigurationData] = field(factory=list, metadata={'description': 'The unordered list of bare metal machine configuration.'})  # fmt: skip
    network_rack_id: str = field(metadata={'description': 'The resource ID of the network rack that matches this rack definition.'})  # fmt: skip
    rack_location: Optional[str] = field(default=None, metadata={'description': 'The free-form description of the rack s location.'})  # fmt: skip
    rack_serial_number: str = field(metadata={'description': 'The unique identifier for the rack within Network Cloud cluster.'})  # fmt: skip
    rack_sku_id: str = field(metadata={'description': 'The resource ID of the sku for the rack being added.'})  # fmt: skip
    storage_appliance_configuration_data: List[AzureStorageApplianceConfigurationData] = field(factory=list, metadata={'description': 'The list of storage appliance configuration data for this rack.'})  # fmt: skip


@define(slots=False, kw_only=True)
class AzureClusterAvailableUpgradeVersion(AzureModel):
    kind: ClassVar[str] = "azure_cluster_available_upgrade_version"
    mapping: ClassVar[Dict[str, Bender]] = {
        "control_impact": S("controlImpact"),
        "expected_duration": S("expectedDuration"),
        "impact_description": S("impactDescription"),
        "support_expiry_date": S("supportExpiryDate"),
        "target_cluster_version": S("targetClusterVersion"),
        "workload_impact": S("workloadImpact"),
    }
    control_impact: Optional[ControlImpact] = field(default=None, metadata={'description': 'The indicator of whether the control plane will be impacted during the upgrade.'})  # fmt: skip
    expected_duration: Optional[str] = field(default=None, metadata={'description': 'The expected duration needed for this upgrade.'})  # fmt: skip
    impact_description: Optional[str] = field(default=None, metadata={'description': 'The impact description including the specific details and release notes.'})  # fmt: skip
    support_expiry_date: Optional[str] = field(default=None, metadata={'description': 'The last date the version of the platform is supported.'})  # fmt: skip
    target_cluster_version: Optional[str] = field(default=None, metadata={'description': 'The target version this cluster will be upgraded to.'})  # fmt: skip
    workload_impact: Optional[WorkloadImpact] = field(default=None, metadata={'description': 'The indicator of whether the workload will be impacted during the upgrade.'})  # fmt: skip


@define(slots=False, kw_only=True)
class AzureClusterCapacity(AzureModel):
    kind: ClassVar[str] = "azure_cluster_capacity"
    mapping: ClassVar[Dict[str, Bender]] = {
        "available_appliance_storage_gb": S("availableApplianceStorageGB"),
        "available_core_count": S("availableCoreCount"),
        "available_host_storage_gb": S("availableHostStorageGB"),
        "available_memory_gb": S("availableMemoryGB"),
        "total_appliance_storage_gb": S("totalApplianceStorageGB"),
        "total_core_count": S("totalCoreCount"),
        "total_host_storage_gb": S("totalHostStorageGB"),
        "total_memory_gb": S("totalMemoryGB"),
    }
    available_appliance_storage_gb: Optional[int] = field(default=None, metadata={'description': 'The remaining appliance-based storage in GB available for workload use.'})  # fmt: skip
    available_core_count: Optional[int] = field(default=None, metadata={'description': 'The remaining number of cores that are available in this cluster for workload use.'})  # fmt: skip
    available_host_storage_gb: Optional[int] = field(default=None, metadata={'description': 'The remaining machine or host-based storage in GB available for workload use.'})  # fmt: skip
    available_memory_gb: Optional[int] = field(default=None, metadata={'description': 'The remaining memory in GB that are available in this cluster for workload use.'})  # fmt: skip
    total_appliance_storage_gb: Optional[int] = field(default=None, metadata={'description': 'The total appliance-based storage in GB supported by this cluster for workload use.'})  # fmt: skip
    total_core_count: Optional[int] = field(default=None, metadata={'description': 'The total number of cores that are supported by this cluster for workload use.'})  # fmt: skip
    total_host_storage_gb: Optional[int] = field(default=None, metadata={'description': 'The total machine or host-based storage in GB supported by this cluster for workload use.'})  # fmt: skip
    total_memory_gb: Optional[int] = field(default=None, metadata={'description': 'The total memory supported by this cluster for workload use.'})  # fmt: skip


@define(slots=False, kw_only=True)
class AzureServicePrincipalInformation(AzureModel):
    kind: ClassVar[str] = "azure_service_principal_information"
    mapping: ClassVar[Dict[str, Bender]] = {
        "application_id": S("applicationId"),
        "password": S("password"),
        "principal_id": S("principalId"),
        "tenant_id": S("tenantId"),
    }
    application_id: str = field(metadata={"description": "The application ID, also known as client ID, of the service principal."})  # fmt: skip
    password: str = field(metadata={"description": "The password of the service principal."})
    principal_id: str = field(metadata={"description": "The principal ID, also known as the object ID, of the service principal."})  # fmt: skip
    tenant_id: str = field(metadata={"description": "The tenant ID, also known as the directory ID, of the tenant in which the service principal is created."})  # fmt: skip


@define(slots=False, kw_only=True)
class AzureValidationThreshold(AzureModel):
    kind: ClassVar[str] = "azure_validation_threshold"
    mapping: ClassVar[Dict[str, Bender]] = {"grouping": S("grouping"), "type": S("type"), "value": S("value")}
    grouping: ValidationThresholdGrouping = field(metadata={'description': 'Selection of how the type evaluation is applied to the cluster calculation.'})  # fmt: skip
    type: ValidationThresholdType = field(metadata={'description': 'Selection of how the threshold should be evaluated.'})  # fmt: skip
    value: int = field(metadata={"description": "The numeric threshold value."})


@define(slots=False, kw_only=True)
class AzureClusterProperties(AzureModel):
    kind: ClassVar[str] = "azure_cluster_properties"
    mapping: ClassVar[Dict[str, Bender]] = {
        "aggregator_or_single_rack_definition": S("aggregatorOrSingleRackDefinition")
        >> Bend(AzureRackDefinition.mapping),
        "analytics_workspace_id": S("analyticsWorkspaceId"),
        "available_upgrade_versions": S("availableUpgradeVersions")
        >> ForallBend(AzureClusterAvailableUpgradeVersion.mapping),
        "cluster_capacity": S("clusterCapacity") >> Bend(AzureClusterCapacity.mapping),
        "cluster_connection_status": S("clusterConnectionStatus"),
        "cluster_extended_location": S("clusterExtendedLocation") >> Bend(AzureExtendedLocation.mapping),
        "cluster_location": S("clusterLocation"),
        "cluster_manager_connection_status": S("clusterManagerConnectionStatus"),
        "cluster_manager_id": S("clusterManagerId"),
        "cluster_service_principal": S("clusterServicePrincipal") >> Bend(AzureServicePrincipalInformation.mapping),
        "cluster_type": S("clusterType"),
        "cluster_version": S("clusterVersion"),
        "compute_deployment_threshold": S("computeDeploymentThreshold") >> Bend(AzureValidationThreshold.mapping),
        "compute_rack_definitions": S("computeRackDefinitions") >> ForallBend(AzureRackDefinition.mapping),
        "detailed_status": S("detailedStatus"),
        "detailed_status_message": S("detailedStatusMessage"),
        "hybrid_aks_extended_location": S("hybridAksExtendedLocation") >> Bend(AzureExtendedLocation.mapping),
        "managed_resource_group_configuration": S("managedResourceGroupConfiguration")
        >> Bend(AzureManagedResourceGroupConfiguration.mapping),
        "manual_action_count": S("manualActionCount"),
        "network_fabric_id": S("networkFabricId"),
        "provisioning_state": S("provisioningState"),
        "support_expiry_date": S("supportExpiryDate"),
        "workload_resource_ids": S("workloadResourceIds"),
    }
    aggregator_or_single_rack_definition: AzureRackDefinition = field(metadata={'description': 'The rack definition that is intended to reflect only a single rack in a single rack cluster, or an aggregator rack in a multi-rack cluster.'})  # fmt: skip
    analytics_workspace_id: Optional[str] = field(default=None, metadata={'description': 'The resource ID of the Log Analytics Workspace that will be used for storing relevant logs.'})  # fmt: skip
    available_upgrade_versions: List[AzureClusterAvailableUpgradeVersion] = field(factory=list, metadata={'description': 'The list of cluster runtime version upgrades available for this cluster.'})  # fmt: skip
    cluster_capacity: Optional[AzureClusterCapacity] = field(default=None, metadata={'description': 'The capacity supported by this cluster.'})  # fmt: skip
    cluster_connection_status: Optional[ClusterConnectionStatus] = field(default=None, metadata={'description': 'The latest heartbeat status between the cluster manager and the cluster.'})  # fmt: skip
    cluster_extended_location: Optional[AzureExtendedLocation] = field(default=None, metadata={'description': 'The extended location (custom location) that represents the cluster s control plane location.'})  # fmt: skip
    cluster_location: Optional[str] = field(default=None, metadata={'description': 'The customer-provided location information to identify where the cluster resides.'})  # fmt: skip
    cluster_manager_connection_status: Optional[ClusterManagerConnectionStatus] = field(default=None, metadata={'description': 'The latest connectivity status between cluster manager and the cluster.'})  # fmt: skip
    cluster_manager_id: Optional[str] = field(default=None, metadata={'description': 'The resource ID of the cluster manager that manages this cluster.'})  # fmt: skip
    cluster_service_principal: Optional[AzureServicePrincipalInformation] = field(default=None, metadata={'description': 'The service principal to be used by the cluster during Arc Appliance installation.'})  # fmt: skip
    cluster_type: ClusterType = field(metadata={"description": "The type of rack configuration for the cluster."})
    cluster_version: str = field(metadata={'description': 'The current runtime version of the cluster.'})  # fmt: skip
    compute_deployment_threshold: Optional[AzureValidationThreshold] = field(default=None, metadata={'description': 'The validation threshold indicating the allowable failures of compute machines during environment validation and deployment.'})  # fmt: skip
    compute_rack_definitions: List[AzureRackDefinition] = field(factory=list, metadata={'description': 'The list of rack definitions for the compute racks in a multi-rack cluster, or an empty list in a single-rack cluster.'})  # fmt: skip
    detailed_status: Optional[ClusterDetailedStatus] = field(default=None, metadata={'description': 'The current detailed status of the cluster.'})  # fmt: skip
    detailed_status_message: Optional[str] = field(default=None, metadata={'description': 'The descriptive message about the detailed status.'})  # fmt: skip
    hybrid_aks_extended_location: Optional[AzureExtendedLocation] = field(default=None, metadata={'description': 'Field Deprecated. This field will not be populated in an upcoming version.', 'deprecated': True})  # fmt: skip
    managed_resource_group_configuration: Optional[AzureManagedResourceGroupConfiguration] = field(default=None, metadata={'description': 'The configuration of the managed resource group associated with the resource.'})  # fmt: skip
    manual_action_count: Optional[int] = field(default=None, metadata={'description': 'The count of Manual Action Taken (MAT) events that have not been validated.'})  # fmt: skip
    network_fabric_id: str = field(metadata={'description': 'The resource ID of the Network Fabric associated with the cluster.'})  # fmt: skip
    provisioning_state: Optional[ClusterProvisioningState] = field(default=None, metadata={'description': 'The provisioning state of the cluster.'})  # fmt: skip
    support_expiry_date: Optional[str] = field(default=None, metadata={'description': 'The support end date of the runtime version of the cluster.'})  # fmt: skip
    workload_resource_ids: List[str] = field(factory=list, metadata={'description': 'The list of workload resource IDs that are hosted within this cluster.'})  # fmt: skip


@define(slots=False, kw_only=True)
class AzureNetworkCloudCluster(AzureTrackedResource):
    kind: ClassVar[str] = "azure_network_cloud_cluster"
    mapping: ClassVar[Dict[str, Bender]] = AzureTrackedResource.mapping | {
        "extended_location": S("extendedLocation") >> Bend(AzureExtendedLocation.mapping),
        "properties": S("properties") >> Bend(AzureClusterProperties.mapping),
    }
    extended_location: AzureExtendedLocation = field(metadata={'description': 'The extended location of the cluster manager associated with the cluster.'})  # fmt: skip
    properties: AzureClusterProperties = field(metadata={"description": "The list of the resource properties."})


@define(slots=False, kw_only=True)
class AzureNetworkCloudClusterList(AzurePagedList):
    kind: ClassVar[str] = "azure_network_cloud_cluster_list"
    mapping: ClassVar[Dict[str, Bender]] = AzurePagedList.mapping | {
        "value": S("value") >> ForallBend(AzureNetworkCloudCluster.mapping),
    }
    value: List[AzureNetworkCloudCluster] = field(factory=list, metadata={"description": "The list of clusters."})


@define(slots=False, kw_only=True)
class AzureClusterPatchProperties(AzureModel):
    kind: ClassVar[str] = "azure_cluster_patch_properties"
    mapping: ClassVar[Dict[str, Bender]] = {
        "aggregator_or_single_rack_definition": S("aggregatorOrSingleRackDefinition")
        >> Bend(AzureRackDefinition.mapping),
        "cluster_location": S("clusterLocation"),
        "cluster_service_principal": S("clusterServicePrincipal") >> Bend(AzureServicePrincipalInformation.mapping),
        "compute_deployment_threshold": S("computeDeploymentThreshold") >> Bend(AzureValidationThreshold.mapping),
        "compute_rack_definitions": S("computeRackDefinitions") >> ForallBend(AzureRackDefinition.mapping),
    }
    aggregator_or_single_rack_definition: Optional[AzureRackDefinition] = field(default=None, metadata={'description': 'The rack definition that is intended to reflect only a single rack in a single rack cluster, or an aggregator rack in a multi-rack cluster.'})  # fmt: skip
    cluster_location: Optional[str] = field(default=None, metadata={'description': 'The customer-provided location information to identify where the cluster resides.'})  # fmt: skip
    cluster_service_principal: Optional[AzureServicePrincipalInformation] = field(default=None, metadata={'description': 'The service principal to be used by the cluster during Arc Appliance installation.'})  # fmt: skip
    compute_deployment_threshold: Optional[AzureValidationThreshold] = field(default=None, metadata={'description': 'The validation threshold indicating the allowable failures of compute machines during environment validation and deployment.'})  # fmt: skip
    compute_rack_definitions: List[AzureRackDefinition] = field(factory=list, metadata={'description': 'The list of rack definitions for the compute racks in a multi-rack cluster.'})  # fmt: skip


@define(slots=False, kw_only=True)
class AzureNetworkCloudClusterPatchParameters(AzureModel):
    kind: ClassVar[str] = "azure_network_cloud_cluster_patch_parameters"
    mapping: ClassVar[Dict[str, Bender]] = {
        "properties": S("properties") >> Bend(AzureClusterPatchProperties.mapping),
        "tags": S("tags"),
    }
    properties: Optional[AzureClusterPatchProperties] = field(default=None, metadata={'description': 'The list of the resource properties.'})  # fmt: skip
    tags: Dict[str, Any] = field(factory=dict, metadata={"description": "The Azure resource tags that will replace the existing ones."})  # fmt: skip


# endregion

# region virtual machine


@define(slots=False, kw_only=True)
class AzureImageRepositoryCredentials(AzureModel):
    kind: ClassVar[str] = "azure_image_repository_credentials"
    mapping: ClassVar[Dict[str, Bender]] = {
        "password": S("password"),
        "registry_url": S("registryUrl"),
        "username": S("username"),
    }
    password: str = field(metadata={'description': 'The password or token used to access an image in the target repository.'})  # fmt: skip
    registry_url: str = field(metadata={'description': 'The URL of the authentication server used to validate the repository credentials.'})  # fmt: skip
    username: str = field(metadata={'description': 'The username used to access an image in the target repository.'})  # fmt: skip


@define(slots=False, kw_only=True)
class AzureOsDisk(AzureModel):
    kind: ClassVar[str] = "azure_os_disk"
    mapping: ClassVar[Dict[str, Bender]] = {
        "create_option": S("createOption"),
        "delete_option": S("deleteOption"),
        "disk_size_gb": S("diskSizeGB"),
    }
    create_option: Optional[OsDiskCreateOption] = field(default=None, metadata={'description': 'The strategy for creating the OS disk.', 'default_value': OsDiskCreateOption.EPHEMERAL})  # fmt: skip
    delete_option: Optional[OsDiskDeleteOption] = field(default=None, metadata={'description': 'The strategy for deleting the OS disk.', 'default_value': OsDiskDeleteOption.DELETE})  # fmt: skip
    disk_size_gb: int = field(metadata={"description": "The size of the disk in gigabytes."})


@define(slots=False, kw_only=True)
class AzureStorageProfile(AzureModel):
    kind: ClassVar[str] = "azure_storage_profile"
    mapping: ClassVar[Dict[str, Bender]] = {
        "os_disk": S("osDisk") >> Bend(AzureOsDisk.mapping),
        "volume_attachments": S("volumeAttachments"),
    }
    os_disk: AzureOsDisk = field(metadata={"description": "The disk to use with this virtual machine."})
    volume_attachments: List[str] = field(factory=list, metadata={'description': 'The resource IDs of volumes that are requested to be attached to the virtual machine.'})  # fmt: skip


@define(slots=False, kw_only=True)
class AzureVirtualMachinePlacementHint(AzureModel):
    kind: ClassVar[str] = "azure_virtual_machine_placement_hint"
    mapping: ClassVar[Dict[str, Bender]] = {
        "hint_type": S("hintType"),
        "resource_id": S("resourceId"),
        "scheduling_execution": S("schedulingExecution"),
        "scope": S("scope"),
    }
    hint_type: VirtualMachinePlacementHintType = field(metadata={'description': 'The specification of whether this hint supports affinity or anti-affinity with the referenced resources.'})  # fmt: skip
    resource_id: str = field(metadata={'description': 'The resource ID of the target object that the placement hints will be checked against.'})  # fmt: skip
    scheduling_execution: VirtualMachineSchedulingExecution = field(metadata={'description': 'The indicator of whether the hint is a hard or soft requirement during scheduling.'})  # fmt: skip
    scope: VirtualMachinePlacementHintPodAffinityScope = field(metadata={'description': 'The scope for the virtual machine affinity or anti-affinity placement hint.'})  # fmt: skip


@define(slots=False, kw_only=True)
class AzureVirtualMachineProperties(AzureModel):
    kind: ClassVar[str] = "azure_virtual_machine_properties"
    mapping: ClassVar[Dict[str, Bender]] = {
        "admin_username": S("adminUsername"),
        "availability_zone": S("availabilityZone"),
        "bare_metal_machine_id": S("bareMetalMachineId"),
        "boot_method": S("bootMethod"),
        "cloud_services_network_attachment": S("cloudServicesNetworkAttachment")
        >> Bend(AzureNetworkAttachment.mapping),
        "cluster_id": S("clusterId"),
        "cpu_cores": S("cpuCores"),
        "detailed_status": S("detailedStatus"),
        "detailed_status_message": S("detailedStatusMessage"),
        "isolate_emulator_thread": S("isolateEmulatorThread"),
        "memory_size_gb": S("memorySizeGB"),
        "network_attachments": S("networkAttachments") >> ForallBend(AzureNetworkAttachment.mapping),
        "network_data": S("networkData"),
        "placement_hints": S("placementHints") >> ForallBend(AzureVirtualMachinePlacementHint.mapping),
        "power_state": S("powerState"),
        "provisioning_state": S("provisioningState"),
        "ssh_public_keys": S("sshPublicKeys") >> ForallBend(AzureSshPublicKey.mapping),
        "storage_profile": S("storageProfile") >> Bend(AzureStorageProfile.mapping),
        "user_data": S("userData"),
        "virtio_interface": S("virtioInterface"),
        "vm_device_model": S("vmDeviceModel"),
        "vm_image": S("vmImage"),
        "vm_image_repository_credentials": S("vmImageRepositoryCredentials")
        >> Bend(AzureImageRepositoryCredentials.mapping),
        "volumes": S("volumes"),
    }
    admin_username: str = field(metadata={'description': 'The name of the administrator to which the ssh public keys will be added into the authorized keys.'})  # fmt: skip
    availability_zone: Optional[str] = field(default=None, metadata={'description': 'The cluster availability zone containing this virtual machine.'})  # fmt: skip
    bare_metal_machine_id: Optional[str] = field(default=None, metadata={'description': 'The resource ID of the bare metal machine that hosts the virtual machine.'})  # fmt: skip
    boot_method: Optional[VirtualMachineBootMethod] = field(default=None, metadata={'description': 'Selects the boot method for the virtual machine.', 'default_value': VirtualMachineBootMethod.UEFI})  # fmt: skip
    cloud_services_network_attachment: AzureNetworkAttachment = field(metadata={'description': 'The cloud service network that provides platform-level services for the virtual machine.'})  # fmt: skip
    cluster_id: Optional[str] = field(default=None, metadata={'description': 'The resource ID of the cluster the virtual machine is created for.'})  # fmt: skip
    cpu_cores: int = field(metadata={"description": "The number of CPU cores in the virtual machine."})
    detailed_status: Optional[VirtualMachineDetailedStatus] = field(default=None, metadata={'description': 'The more detailed status of the virtual machine.'})  # fmt: skip
    detailed_status_message: Optional[str] = field(default=None, metadata={'description': 'The descriptive message about the current detailed status.'})  # fmt: skip
    isolate_emulator_thread: Optional[VirtualMachineIsolateEmulatorThread] = field(default=None, metadata={'description': 'Field Deprecated, the value will be ignored if provided. The indicator of whether one of the specified CPU cores is isolated to run the emulator thread for this virtual machine.', 'deprecated': True, 'default_value': VirtualMachineIsolateEmulatorThread.TRUE})  # fmt: skip
    memory_size_gb: int = field(metadata={'description': 'The memory size of the virtual machine. Allocations are measured in gibibytes.'})  # fmt: skip
    network_attachments: List[AzureNetworkAttachment] = field(factory=list, metadata={'description': 'The list of network attachments to the virtual machine.'})  # fmt: skip
    network_data: Optional[str] = field(default=None, metadata={'description': 'The Base64 encoded cloud-init network data.'})  # fmt: skip
    placement_hints: List[AzureVirtualMachinePlacementHint] = field(factory=list, metadata={'description': 'The scheduling hints for the virtual machine.'})  # fmt: skip
    power_state: Optional[VirtualMachinePowerState] = field(default=None, metadata={'description': 'The power state of the virtual machine.'})  # fmt: skip
    provisioning_state: Optional[VirtualMachineProvisioningState] = field(default=None, metadata={'description': 'The provisioning state of the virtual machine.'})  # fmt: skip
    ssh_public_keys: List[AzureSshPublicKey] = field(factory=list, metadata={'description': 'The list of ssh public keys. Each key will be added to the virtual machine using the cloud-init ssh_authorized_keys mechanism for the adminUsername.'})  # fmt: skip
    storage_profile: AzureStorageProfile = field(metadata={'description': 'The storage profile that specifies size and other parameters about the disks related to the virtual machine.'})  # fmt: skip
    user_data: Optional[str] = field(default=None, metadata={'description': 'The Base64 encoded cloud-init user data.'})  # fmt: skip
    virtio_interface: Optional[VirtualMachineVirtioInterfaceType] = field(default=None, metadata={'description': 'Field Deprecated, use virtualizationModel instead. The type of the virtio interface.', 'deprecated': True, 'default_value': VirtualMachineVirtioInterfaceType.MODERN})  # fmt: skip
    vm_device_model: Optional[VirtualMachineDeviceModelType] = field(default=None, metadata={'description': 'The type of the device model to use.', 'default_value': VirtualMachineDeviceModelType.T2})  # fmt: skip
    vm_image: str = field(metadata={'description': 'The virtual machine image that is currently provisioned to the OS disk, using the full url and tag notation used to pull the image.'})  # fmt: skip
    vm_image_repository_credentials: Optional[AzureImageRepositoryCredentials] = field(default=None, metadata={'description': 'The credentials used to login to the image repository that has access to the specified image.'})  # fmt: skip
    volumes: List[str] = field(factory=list, metadata={'description': 'The resource IDs of volumes that are attached to the virtual machine.'})  # fmt: skip


@define(slots=False, kw_only=True)
class AzureNetworkCloudVirtualMachine(AzureTrackedResource):
    kind: ClassVar[str] = "azure_network_cloud_virtual_machine"
    mapping: ClassVar[Dict[str, Bender]] = AzureTrackedResource.mapping | {
        "extended_location": S("extendedLocation") >> Bend(AzureExtendedLocation.mapping),
        "properties": S("properties") >> Bend(AzureVirtualMachineProperties.mapping),
    }
    extended_location: AzureExtendedLocation = field(metadata={'description': 'The extended location of the cluster associated with the resource.'})  # fmt: skip
    properties: AzureVirtualMachineProperties = field(metadata={"description": "The list of the resource properties."})


@define(slots=False, kw_only=True)
class AzureNetworkCloudVirtualMachineList(AzurePagedList):
    kind: ClassVar[str] = "azure_network_cloud_virtual_machine_list"
    mapping: ClassVar[Dict[str, Bender]] = AzurePagedList.mapping | {
        "value": S("value") >> ForallBend(AzureNetworkCloudVirtualMachine.mapping),
    }
    value: List[AzureNetworkCloudVirtualMachine] = field(factory=list, metadata={'description': 'The list of virtual machines.'})  # fmt: skip


@define(slots=False, kw_only=True)
class AzureVirtualMachinePatchProperties(AzureModel):
    kind: ClassVar[str] = "azure_virtual_machine_patch_properties"
    mapping: ClassVar[Dict[str, Bender]] = {
        "vm_image_repository_credentials": S("vmImageRepositoryCredentials")
        >> Bend(AzureImageRepositoryCredentials.mapping),
    }
    vm_image_repository_credentials: Optional[AzureImageRepositoryCredentials] = field(default=None, metadata={'description': 'The credentials used to login to the image repository that has access to the specified image.'})  # fmt: skip


@define(slots=False, kw_only=True)
class AzureNetworkCloudVirtualMachinePatchParameters(AzureModel):
    kind: ClassVar[str] = "azure_network_cloud_virtual_machine_patch_parameters"
    mapping: ClassVar[Dict[str, Bender]] = {
        "properties": S("properties") >> Bend(AzureVirtualMachinePatchProperties.mapping),
        "tags": S("tags"),
    }
    properties: Optional[AzureVirtualMachinePatchProperties] = field(default=None, metadata={'description': 'The list of the resource properties.'})  # fmt: skip
    tags: Dict[str, Any] = field(factory=dict, metadata={"description": "The Azure resource tags that will replace the existing ones."})  # fmt: skip


# endregion

# region kubernetes cluster and agent pools


@define(slots=False, kw_only=True)
class AzureAgentOptions(AzureModel):
    kind: ClassVar[str] = "azure_agent_options"
    mapping: ClassVar[Dict[str, Bender]] = {
        "hugepages_count": S("hugepagesCount"),
        "hugepages_size": S("hugepagesSize"),
    }
    hugepages_count: int = field(metadata={'description': 'The number of hugepages to allocate.'})  # fmt: skip
    hugepages_size: Optional[HugepagesSize] = field(default=None, metadata={'description': 'The size of the hugepages to allocate.', 'default_value': HugepagesSize.SIZE_2M})  # fmt: skip


@define(slots=False, kw_only=True)
class AzureL2NetworkAttachmentConfiguration(AzureModel):
    kind: ClassVar[str] = "azure_l2_network_attachment_configuration"
    mapping: ClassVar[Dict[str, Bender]] = {"network_id": S("networkId"), "plugin_type": S("pluginType")}
    network_id: str = field(metadata={"description": "The resource ID of the network that is being configured for attachment."})  # fmt: skip
    plugin_type: Optional[KubernetesPluginType] = field(default=None, metadata={'description': 'The indicator of how this network will be utilized by the Kubernetes cluster.', 'default_value': KubernetesPluginType.SRIOV})  # fmt: skip


@define(slots=False, kw_only=True)
class AzureL3NetworkAttachmentConfiguration(AzureModel):
    kind: ClassVar[str] = "azure_l3_network_attachment_configuration"
    mapping: ClassVar[Dict[str, Bender]] = {
        "ipam_enabled": S("ipamEnabled"),
        "network_id": S("networkId"),
        "plugin_type": S("pluginType"),
    }
    ipam_enabled: Optional[L3NetworkConfigurationIpamEnabled] = field(default=None, metadata={'description': 'The indication of whether this network will or will not perform IP address management and allocate IP addresses when attached.', 'default_value': L3NetworkConfigurationIpamEnabled.FALSE})  # fmt: skip
    network_id: str = field(metadata={"description": "The resource ID of the network that is being configured for attachment."})  # fmt: skip
    plugin_type: Optional[KubernetesPluginType] = field(default=None, metadata={'description': 'The indicator of how this network will be utilized by the Kubernetes cluster.', 'default_value': KubernetesPluginType.SRIOV})  # fmt: skip


@define(slots=False, kw_only=True)
class AzureTrunkedNetworkAttachmentConfiguration(AzureModel):
    kind: ClassVar[str] = "azure_trunked_network_attachment_configuration"
    mapping: ClassVar[Dict[str, Bender]] = {"network_id": S("networkId"), "plugin_type": S("pluginType")}
    network_id: str = field(metadata={"description": "The resource ID of the network that is being configured for attachment."})  # fmt: skip
    plugin_type: Optional[KubernetesPluginType] = field(default=None, metadata={'description': 'The indicator of how this network will be utilized by the Kubernetes cluster.', 'default_value': KubernetesPluginType.SRIOV})  # fmt: skip


@define(slots=False, kw_only=True)
class AzureAttachedNetworkConfiguration(AzureModel):
    kind: ClassVar[str] = "azure_attached_network_configuration"
    mapping: ClassVar[Dict[str, Bender]] = {
        "l2_networks": S("l2Networks") >> ForallBend(AzureL2NetworkAttachmentConfiguration.mapping),
        "l3_networks": S("l3Networks") >> ForallBend(AzureL3NetworkAttachmentConfiguration.mapping),
        "trunked_networks": S("trunkedNetworks") >> ForallBend(AzureTrunkedNetworkAttachmentConfiguration.mapping),
    }
    l2_networks: List[AzureL2NetworkAttachmentConfiguration] = field(factory=list, metadata={'description': 'The list of Layer 2 Networks and related configuration for attachment.'})  # fmt: skip
    l3_networks: List[AzureL3NetworkAttachmentConfiguration] = field(factory=list, metadata={'description': 'The list of Layer 3 Networks and related configuration for attachment.'})  # fmt: skip
    trunked_networks: List[AzureTrunkedNetworkAttachmentConfiguration] = field(factory=list, metadata={'description': 'The list of Trunked Networks and related configuration for attachment.'})  # fmt: skip


@define(slots=False, kw_only=True)
class AzureAgentPoolUpgradeSettings(AzureModel):
    kind: ClassVar[str] = "azure_agent_pool_upgrade_settings"
    mapping: ClassVar[Dict[str, Bender]] = {"max_surge": S("maxSurge")}
    max_surge: Optional[str] = field(default=None, metadata={'description': 'The maximum number or percentage of nodes that are surged during upgrade.'})  # fmt: skip


@define(slots=False, kw_only=True)
class AzureInitialAgentPoolConfiguration(AzureModel):
    kind: ClassVar[str] = "azure_initial_agent_pool_configuration"
    mapping: ClassVar[Dict[str, Bender]] = {
        "administrator_configuration": S("administratorConfiguration")
        >> Bend(AzureAdministratorConfiguration.mapping),
        "agent_options": S("agentOptions") >> Bend(AzureAgentOptions.mapping),
        "attached_network_configuration": S("attachedNetworkConfiguration")
        >> Bend(AzureAttachedNetworkConfiguration.mapping),
        "availability_zones": S("availabilityZones"),
        "count": S("count"),
        "labels": S("labels") >> ForallBend(AzureKubernetesLabel.mapping),
        "mode": S("mode"),
        "name": S("name"),
        "taints": S("taints") >> ForallBend(AzureKubernetesLabel.mapping),
        "upgrade_settings": S("upgradeSettings") >> Bend(AzureAgentPoolUpgradeSettings.mapping),
        "vm_sku_name": S("vmSkuName"),
    }
    administrator_configuration: Optional[AzureAdministratorConfiguration] = field(default=None, metadata={'description': 'The administrator credentials to be used for the nodes in this agent pool.'})  # fmt: skip
    agent_options: Optional[AzureAgentOptions] = field(default=None, metadata={'description': 'The configurations that will be applied to each agent in this agent pool.'})  # fmt: skip
    attached_network_configuration: Optional[AzureAttachedNetworkConfiguration] = field(default=None, metadata={'description': 'The configuration of networks being attached to the agent pool for use by the workloads that run on this Kubernetes cluster.'})  # fmt: skip
    availability_zones: List[str] = field(factory=list, metadata={'description': 'The list of availability zones of the Network Cloud cluster used for the provisioning of nodes in this agent pool.'})  # fmt: skip
    count: int = field(metadata={"description": "The number of virtual machines that use this configuration."})
    labels: List[AzureKubernetesLabel] = field(factory=list, metadata={'description': 'The labels applied to the nodes in this agent pool.'})  # fmt: skip
    mode: AgentPoolMode = field(metadata={'description': 'The selection of how this agent pool is utilized.'})  # fmt: skip
    name: str = field(metadata={"description": "The name that will be used for the agent pool resource."})
    taints: List[AzureKubernetesLabel] = field(factory=list, metadata={'description': 'The taints applied to the nodes in this agent pool.'})  # fmt: skip
    upgrade_settings: Optional[AzureAgentPoolUpgradeSettings] = field(default=None, metadata={'description': 'The configuration of the agent pool.'})  # fmt: skip
    vm_sku_name: str = field(metadata={'description': 'The name of the VM SKU that determines the size of resources allocated for node VMs.'})  # fmt: skip


@define(slots=False, kw_only=True)
class AzureAadConfiguration(AzureModel):
    kind: ClassVar[str] = "azure_aad_configuration"
    mapping: ClassVar[Dict[str, Bender]] = {"admin_group_object_ids": S("adminGroupObjectIds")}
    admin_group_object_ids: List[str] = field(metadata={'description': 'The list of Azure Active Directory group object IDs that will have an administrative role on the Kubernetes cluster.'})  # fmt: skip


@define(slots=False, kw_only=True)
class AzureAvailableUpgrade(AzureModel):
    kind: ClassVar[str] = "azure_available_upgrade"
    mapping: ClassVar[Dict[str, Bender]] = {
        "availability_lifecycle": S("availabilityLifecycle"),
        "version": S("version"),
    }
    availability_lifecycle: Optional[AvailabilityLifecycle] = field(default=None, metadata={'description': 'The version lifecycle indicator.'})  # fmt: skip
    version: Optional[str] = field(default=None, metadata={"description": "The version available for upgrading."})


@define(slots=False, kw_only=True)
class AzureControlPlaneNodeConfiguration(AzureModel):
    kind: ClassVar[str] = "azure_control_plane_node_configuration"
    mapping: ClassVar[Dict[str, Bender]] = {
        "administrator_configuration": S("administratorConfiguration")
        >> Bend(AzureAdministratorConfiguration.mapping),
        "availability_zones": S("availabilityZones"),
        "count": S("count"),
        "vm_sku_name": S("vmSkuName"),
    }
    administrator_configuration: Optional[AzureAdministratorConfiguration] = field(default=None, metadata={'description': 'The administrator credentials to be used for the nodes in the control plane.'})  # fmt: skip
    availability_zones: List[str] = field(factory=list, metadata={'description': 'The list of availability zones of the Network Cloud cluster to be used for the provisioning of nodes in the control plane.'})  # fmt: skip
    count: int = field(metadata={"description": "The number of virtual machines that use this configuration."})
    vm_sku_name: str = field(metadata={'description': 'The name of the VM SKU supplied during creation.'})  # fmt: skip


@define(slots=False, kw_only=True)
class AzureFeatureStatus(AzureModel):
    kind: ClassVar[str] = "azure_feature_status"
    mapping: ClassVar[Dict[str, Bender]] = {
        "detailed_status": S("detailedStatus"),
        "detailed_status_message": S("detailedStatusMessage"),
        "name": S("name"),
        "version": S("version"),
    }
    detailed_status: Optional[FeatureDetailedStatus] = field(default=None, metadata={'description': 'The status representing the state of this feature.'})  # fmt: skip
    detailed_status_message: Optional[str] = field(default=None, metadata={'description': 'The descriptive message about the current detailed status.'})  # fmt: skip
    name: Optional[str] = field(default=None, metadata={"description": "The name of the feature."})
    version: Optional[str] = field(default=None, metadata={"description": "The version of the feature."})


@define(slots=False, kw_only=True)
class AzureNetworkConfiguration(AzureModel):
    kind: ClassVar[str] = "azure_network_configuration"
    mapping: ClassVar[Dict[str, Bender]] = {
        "attached_network_configuration": S("attachedNetworkConfiguration")
        >> Bend(AzureAttachedNetworkConfiguration.mapping),
        "cloud_services_network_id": S("cloudServicesNetworkId"),
        "cni_network_id": S("cniNetworkId"),
        "dns_service_ip": S("dnsServiceIp"),
        "pod_cidrs": S("podCidrs"),
        "service_cidrs": S("serviceCidrs"),
    }
    attached_network_configuration: Optional[AzureAttachedNetworkConfiguration] = field(default=None, metadata={'description': 'The configuration of networks being attached to the cluster for use by the workloads that run on this Kubernetes cluster.'})  # fmt: skip
    cloud_services_network_id: str = field(metadata={'description': 'The resource ID of the associated Cloud Services network.'})  # fmt: skip
    cni_network_id: str = field(metadata={'description': 'The resource ID of the Layer 3 network that is used for creation of the Container Networking Interface network.'})  # fmt: skip
    dns_service_ip: Optional[str] = field(default=None, metadata={'description': 'The IP address assigned to the Kubernetes DNS service.'})  # fmt: skip
    pod_cidrs: List[str] = field(factory=list, metadata={'description': 'The CIDR notation IP ranges from which to assign pod IPs.'})  # fmt: skip
    service_cidrs: List[str] = field(factory=list, metadata={'description': 'The CIDR notation IP ranges from which to assign service IPs.'})  # fmt: skip


@define(slots=False, kw_only=True)
class AzureKubernetesClusterNode(AzureModel):
    kind: ClassVar[str] = "azure_kubernetes_cluster_node"
    mapping: ClassVar[Dict[str, Bender]] = {
        "agent_pool_id": S("agentPoolId"),
        "availability_zone": S("availabilityZone"),
        "bare_metal_machine_id": S("bareMetalMachineId"),
        "cpu_cores": S("cpuCores"),
        "detailed_status": S("detailedStatus"),
        "detailed_status_message": S("detailedStatusMessage"),
        "disk_size_gb": S("diskSizeGB"),
        "image": S("image"),
        "kubernetes_version": S("kubernetesVersion"),
        "labels": S("labels") >> ForallBend(AzureKubernetesLabel.mapping),
        "memory_size_gb": S("memorySizeGB"),
        "mode": S("mode"),
        "name": S("name"),
        "network_attachments": S("networkAttachments") >> ForallBend(AzureNetworkAttachment.mapping),
        "power_state": S("powerState"),
        "role": S("role"),
        "taints": S("taints") >> ForallBend(AzureKubernetesLabel.mapping),
        "vm_sku_name": S("vmSkuName"),
    }
    agent_pool_id: Optional[str] = field(default=None, metadata={'description': 'The resource ID of the agent pool that this node belongs to.'})  # fmt: skip
    availability_zone: Optional[str] = field(default=None, metadata={'description': 'The availability zone this node is running within.'})  # fmt: skip
    bare_metal_machine_id: Optional[str] = field(default=None, metadata={'description': 'The resource ID of the bare metal machine that hosts this node.'})  # fmt: skip
    cpu_cores: Optional[int] = field(default=None, metadata={'description': 'The number of CPU cores configured for this node, derived from the VM SKU specified.'})  # fmt: skip
    detailed_status: Optional[KubernetesClusterNodeDetailedStatus] = field(default=None, metadata={'description': 'The detailed state of this node.'})  # fmt: skip
    detailed_status_message: Optional[str] = field(default=None, metadata={'description': 'The descriptive message about the current detailed status.'})  # fmt: skip
    disk_size_gb: Optional[int] = field(default=None, metadata={'description': 'The size of the disk configured for this node.'})  # fmt: skip
    image: Optional[str] = field(default=None, metadata={"description": "The machine image used to deploy this node."})
    kubernetes_version: Optional[str] = field(default=None, metadata={'description': 'The currently running version of Kubernetes and bundled features running on this node.'})  # fmt: skip
    labels: List[AzureKubernetesLabel] = field(factory=list, metadata={'description': 'The list of labels on this node that have been assigned to the agent pool containing this node.'})  # fmt: skip
    memory_size_gb: Optional[int] = field(default=None, metadata={'description': 'The amount of memory configured for this node, derived from the vm SKU specified.'})  # fmt: skip
    mode: Optional[AgentPoolMode] = field(default=None, metadata={'description': 'The mode of the agent pool containing this node. Not applicable for control plane nodes.'})  # fmt: skip
    name: Optional[str] = field(default=None, metadata={'description': 'The name of this node, as realized in the Kubernetes cluster.'})  # fmt: skip
    network_attachments: List[AzureNetworkAttachment] = field(factory=list, metadata={'description': 'The NetworkAttachments made to this node.'})  # fmt: skip
    power_state: Optional[KubernetesNodePowerState] = field(default=None, metadata={'description': 'The power state of this node.'})  # fmt: skip
    role: Optional[KubernetesNodeRole] = field(default=None, metadata={'description': 'The role of this node in the cluster.'})  # fmt: skip
    taints: List[AzureKubernetesLabel] = field(factory=list, metadata={'description': 'The list of taints that have been assigned to the agent pool containing this node.'})  # fmt: skip
    vm_sku_name: Optional[str] = field(default=None, metadata={'description': 'The VM SKU name that was used to create this cluster node.'})  # fmt: skip


@define(slots=False, kw_only=True)
class AzureKubernetesClusterProperties(AzureModel):
    kind: ClassVar[str] = "azure_kubernetes_cluster_properties"
    mapping: ClassVar[Dict[str, Bender]] = {
        "aad_configuration": S("aadConfiguration") >> Bend(AzureAadConfiguration.mapping),
        "administrator_configuration": S("administratorConfiguration")
        >> Bend(AzureAdministratorConfiguration.mapping),
        "attached_network_ids": S("attachedNetworkIds"),
        "available_upgrades": S("availableUpgrades") >> ForallBend(AzureAvailableUpgrade.mapping),
        "cluster_id": S("clusterId"),
        "connected_cluster_id": S("connectedClusterId"),
        "control_plane_kubernetes_version": S("controlPlaneKubernetesVersion"),
        "control_plane_node_configuration": S("controlPlaneNodeConfiguration")
        >> Bend(AzureControlPlaneNodeConfiguration.mapping),
        "detailed_status": S("detailedStatus"),
        "detailed_status_message": S("detailedStatusMessage"),
        "feature_statuses": S("featureStatuses") >> ForallBend(AzureFeatureStatus.mapping),
        "initial_agent_pool_configurations": S("initialAgentPoolConfigurations")
        >> ForallBend(AzureInitialAgentPoolConfiguration.mapping),
        "kubernetes_version": S("kubernetesVersion"),
        "managed_resource_group_configuration": S("managedResourceGroupConfiguration")
        >> Bend(AzureManagedResourceGroupConfiguration.mapping),
        "network_configuration": S("networkConfiguration") >> Bend(AzureNetworkConfiguration.mapping),
        "nodes": S("nodes") >> ForallBend(AzureKubernetesClusterNode.mapping),
        "provisioning_state": S("provisioningState"),
    }
    aad_configuration: Optional[AzureAadConfiguration] = field(default=None, metadata={'description': 'The Azure Active Directory Integration properties.'})  # fmt: skip
    administrator_configuration: Optional[AzureAdministratorConfiguration] = field(default=None, metadata={'description': 'The administrative credentials that will be applied to the control plane and agent pool nodes that do not specify their own values.'})  # fmt: skip
    attached_network_ids: List[str] = field(factory=list, metadata={'description': 'The full list of network resource IDs that are attached to this cluster.'})  # fmt: skip
    available_upgrades: List[AzureAvailableUpgrade] = field(factory=list, metadata={'description': 'The list of versions that this Kubernetes cluster can be upgraded to.'})  # fmt: skip
    cluster_id: Optional[str] = field(default=None, metadata={'description': 'The resource ID of the Network Cloud cluster.'})  # fmt: skip
    connected_cluster_id: Optional[str] = field(default=None, metadata={'description': 'The resource ID of the connected cluster set up when this Kubernetes cluster is created.'})  # fmt: skip
    control_plane_kubernetes_version: Optional[str] = field(default=None, metadata={'description': 'The current running version of Kubernetes on the control plane.'})  # fmt: skip
    control_plane_node_configuration: AzureControlPlaneNodeConfiguration = field(metadata={'description': 'The defining characteristics of the control plane for this Kubernetes Cluster.'})  # fmt: skip
    detailed_status: Optional[KubernetesClusterDetailedStatus] = field(default=None, metadata={'description': 'The current status of the Kubernetes cluster.'})  # fmt: skip
    detailed_status_message: Optional[str] = field(default=None, metadata={'description': 'The descriptive message about the current detailed status.'})  # fmt: skip
    feature_statuses: List[AzureFeatureStatus] = field(factory=list, metadata={'description': 'The current feature settings.'})  # fmt: skip
    initial_agent_pool_configurations: List[AzureInitialAgentPoolConfiguration] = field(metadata={'description': 'The agent pools that are created with this Kubernetes cluster for running critical system services and workloads.'})  # fmt: skip
    kubernetes_version: str = field(metadata={'description': 'The Kubernetes version for this cluster.'})  # fmt: skip
    managed_resource_group_configuration: Optional[AzureManagedResourceGroupConfiguration] = field(default=None, metadata={'description': 'The configuration of the managed resource group associated with the resource.'})  # fmt: skip
    network_configuration: AzureNetworkConfiguration = field(metadata={'description': 'The configuration of the Kubernetes cluster networking.'})  # fmt: skip
    nodes: List[AzureKubernetesClusterNode] = field(factory=list, metadata={'description': 'The details of the nodes in this cluster.'})  # fmt: skip
    provisioning_state: Optional[KubernetesClusterProvisioningState] = field(default=None, metadata={'description': 'The provisioning state of the Kubernetes cluster resource.'})  # fmt: skip


@define(slots=False, kw_only=True)
class AzureNetworkCloudKubernetesCluster(AzureTrackedResource):
    kind: ClassVar[str] = "azure_network_cloud_kubernetes_cluster"
    mapping: ClassVar[Dict[str, Bender]] = AzureTrackedResource.mapping | {
        "extended_location": S("extendedLocation") >> Bend(AzureExtendedLocation.mapping),
        "properties": S("properties") >> Bend(AzureKubernetesClusterProperties.mapping),
    }
    extended_location: AzureExtendedLocation = field(metadata={'description': 'The extended location of the cluster associated with the resource.'})  # fmt: skip
    properties: AzureKubernetesClusterProperties = field(metadata={'description': 'The list of the resource properties.'})  # fmt: skip


@define(slots=False, kw_only=True)
class AzureNetworkCloudKubernetesClusterList(AzurePagedList):
    kind: ClassVar[str] = "azure_network_cloud_kubernetes_cluster_list"
    mapping: ClassVar[Dict[str, Bender]] = AzurePagedList.mapping | {
        "value": S("value") >> ForallBend(AzureNetworkCloudKubernetesCluster.mapping),
    }
    value: List[AzureNetworkCloudKubernetesCluster] = field(factory=list, metadata={'description': 'The list of additional details related to Kubernetes clusters.'})  # fmt: skip


@define(slots=False, kw_only=True)
class AzureControlPlaneNodePatchConfiguration(AzureModel):
    kind: ClassVar[str] = "azure_control_plane_node_patch_configuration"
    mapping: ClassVar[Dict[str, Bender]] = {"count": S("count")}
    count: Optional[int] = field(default=None, metadata={'description': 'The number of virtual machines that use this configuration.'})  # fmt: skip


@define(slots=False, kw_only=True)
class AzureKubernetesClusterPatchProperties(AzureModel):
    kind: ClassVar[str] = "azure_kubernetes_cluster_patch_properties"
    mapping: ClassVar[Dict[str, Bender]] = {
        "control_plane_node_configuration": S("controlPlaneNodeConfiguration")
        >> Bend(AzureControlPlaneNodePatchConfiguration.mapping),
        "kubernetes_version": S("kubernetesVersion"),
    }
    control_plane_node_configuration: Optional[AzureControlPlaneNodePatchConfiguration] = field(default=None, metadata={'description': 'The configuration of the control plane that can be patched.'})  # fmt: skip
    kubernetes_version: Optional[str] = field(default=None, metadata={'description': 'The Kubernetes version for this cluster.'})  # fmt: skip


@define(slots=False, kw_only=True)
class AzureNetworkCloudKubernetesClusterPatchParameters(AzureModel):
    kind: ClassVar[str] = "azure_network_cloud_kubernetes_cluster_patch_parameters"
    mapping: ClassVar[Dict[str, Bender]] = {
        "properties": S("properties") >> Bend(AzureKubernetesClusterPatchProperties.mapping),
        "tags": S("tags"),
    }
    properties: Optional[AzureKubernetesClusterPatchProperties] = field(default=None, metadata={'description': 'The list of the resource properties.'})  # fmt: skip
    tags: Dict[str, Any] = field(factory=dict, metadata={"description": "The Azure resource tags that will replace the existing ones."})  # fmt: skip


@define(slots=False, kw_only=True)
class AzureAgentPoolProperties(AzureModel):
    kind: ClassVar[str] = "azure_agent_pool_properties"
    mapping: ClassVar[Dict[str, Bender]] = {
        "administrator_configuration": S("administratorConfiguration")
        >> Bend(AzureAdministratorConfiguration.mapping),
        "agent_options": S("agentOptions") >> Bend(AzureAgentOptions.mapping),
        "attached_network_configuration": S("attachedNetworkConfiguration")
        >> Bend(AzureAttachedNetworkConfiguration.mapping),
        "availability_zones": S("availabilityZones"),
        "count": S("count"),
        "detailed_status": S("detailedStatus"),
        "detailed_status_message": S("detailedStatusMessage"),
        "kubernetes_version": S("kubernetesVersion"),
        "labels": S("labels") >> ForallBend(AzureKubernetesLabel.mapping),
        "mode": S("mode"),
        "provisioning_state": S("provisioningState"),
        "taints": S("taints") >> ForallBend(AzureKubernetesLabel.mapping),
        "upgrade_settings": S("upgradeSettings") >> Bend(AzureAgentPoolUpgradeSettings.mapping),
        "vm_sku_name": S("vmSkuName"),
    }
    administrator_configuration: Optional[AzureAdministratorConfiguration] = field(default=None, metadata={'description': 'The administrator credentials to be used for the nodes in this agent pool.'})  # fmt: skip
    agent_options: Optional[AzureAgentOptions] = field(default=None, metadata={'description': 'The configurations that will be applied to each agent in this agent pool.'})  # fmt: skip
    attached_network_configuration: Optional[AzureAttachedNetworkConfiguration] = field(default=None, metadata={'description': 'The configuration of networks being attached to the agent pool for use by the workloads that run on this Kubernetes cluster.'})  # fmt: skip
    availability_zones: List[str] = field(factory=list, metadata={'description': 'The list of availability zones of the Network Cloud cluster used for the provisioning of nodes in this agent pool.'})  # fmt: skip
    count: int = field(metadata={"description": "The number of virtual machines that use this configuration."})
    detailed_status: Optional[AgentPoolDetailedStatus] = field(default=None, metadata={'description': 'The current status of the agent pool.'})  # fmt: skip
    detailed_status_message: Optional[str] = field(default=None, metadata={'description': 'The descriptive message about the current detailed status.'})  # fmt: skip
    kubernetes_version: Optional[str] = field(default=None, metadata={'description': 'The Kubernetes version running in this agent pool.'})  # fmt: skip
    labels: List[AzureKubernetesLabel] = field(factory=list, metadata={'description': 'The labels applied to the nodes in this agent pool.'})  # fmt: skip
    mode: AgentPoolMode = field(metadata={'description': 'The selection of how this agent pool is utilized.'})  # fmt: skip
    provisioning_state: Optional[AgentPoolProvisioningState] = field(default=None, metadata={'description': 'The provisioning state of the agent pool.'})  # fmt: skip
    taints: List[AzureKubernetesLabel] = field(factory=list, metadata={'description': 'The taints applied to the nodes in this agent pool.'})  # fmt: skip
    upgrade_settings: Optional[AzureAgentPoolUpgradeSettings] = field(default=None, metadata={'description': 'The configuration of the agent pool.'})  # fmt: skip
    vm_sku_name: str = field(metadata={'description': 'The name of the VM SKU that determines the size of resources allocated for node VMs.'})  # fmt: skip


@define(slots=False, kw_only=True)
class AzureNetworkCloudAgentPool(AzureTrackedResource):
    kind: ClassVar[str] = "azure_network_cloud_agent_pool"
    mapping: ClassVar[Dict[str, Bender]] = AzureTrackedResource.mapping | {
        "extended_location": S("extendedLocation") >> Bend(AzureExtendedLocation.mapping),
        "properties": S("properties") >> Bend(AzureAgentPoolProperties.mapping),
    }
    extended_location: Optional[AzureExtendedLocation] = field(default=None, metadata={'description': 'The extended location of the cluster associated with the resource.'})  # fmt: skip
    properties: AzureAgentPoolProperties = field(metadata={"description": "The list of the resource properties."})


@define(slots=False, kw_only=True)
class AzureNetworkCloudAgentPoolList(AzurePagedList):
    kind: ClassVar[str] = "azure_network_cloud_agent_pool_list"
    mapping: ClassVar[Dict[str, Bender]] = AzurePagedList.mapping | {
        "value": S("value") >> ForallBend(AzureNetworkCloudAgentPool.mapping),
    }
    value: List[AzureNetworkCloudAgentPool] = field(factory=list, metadata={"description": "The list of agent pools."})


@define(slots=False, kw_only=True)
class AzureAgentPoolPatchProperties(AzureModel):
    kind: ClassVar[str] = "azure_agent_pool_patch_properties"
    mapping: ClassVar[Dict[str, Bender]] = {
        "count": S("count"),
        "upgrade_settings": S("upgradeSettings") >> Bend(AzureAgentPoolUpgradeSettings.mapping),
    }
    count: Optional[int] = field(default=None, metadata={'description': 'The number of virtual machines that use this configuration.'})  # fmt: skip
    upgrade_settings: Optional[AzureAgentPoolUpgradeSettings] = field(default=None, metadata={'description': 'The configuration of the agent pool.'})  # fmt: skip


@define(slots=False, kw_only=True)
class AzureNetworkCloudAgentPoolPatchParameters(AzureModel):
    kind: ClassVar[str] = "azure_network_cloud_agent_pool_patch_parameters"
    mapping: ClassVar[Dict[str, Bender]] = {
        "properties": S("properties") >> Bend(AzureAgentPoolPatchProperties.mapping),
        "tags": S("tags"),
    }
    properties: Optional[AzureAgentPoolPatchProperties] = field(default=None, metadata={'description': 'The list of the resource properties.'})  # fmt: skip
    tags: Dict[str, Any] = field(factory=dict, metadata={"description": "The Azure resource tags that will replace the existing ones."})  # fmt: skip


# endregion

# region l3 network


@define(slots=False, kw_only=True)
class AzureL3NetworkProperties(AzureModel):
    kind: ClassVar[str] = "azure_l3_network_properties"
    mapping: ClassVar[Dict[str, Bender]] = {
        "associated_resource_ids": S("associatedResourceIds"),
        "cluster_id": S("clusterId"),
        "detailed_status": S("detailedStatus"),
        "detailed_status_message": S("detailedStatusMessage"),
        "hybrid_aks_clusters_associated_ids": S("hybridAksClustersAssociatedIds"),
        "hybrid_aks_ipam_enabled": S("hybridAksIpamEnabled"),
        "hybrid_aks_plugin_type": S("hybridAksPluginType"),
        "interface_name": S("interfaceName"),
        "ip_allocation_type": S("ipAllocationType"),
        "ipv4_connected_prefix": S("ipv4ConnectedPrefix"),
        "ipv6_connected_prefix": S("ipv6ConnectedPrefix"),
        "l3_isolation_domain_id": S("l3IsolationDomainId"),
        "provisioning_state": S("provisioningState"),
        "virtual_machines_associated_ids": S("virtualMachinesAssociatedIds"),
        "vlan": S("vlan"),
    }
    associated_resource_ids: List[str] = field(factory=list, metadata={'description': 'The list of resource IDs for the other Microsoft.NetworkCloud resources that have attached this network.'})  # fmt: skip
    cluster_id: Optional[str] = field(default=None, metadata={'description': 'The resource ID of the Network Cloud cluster this L3 network is associated with.'})  # fmt: skip
    detailed_status: Optional[L3NetworkDetailedStatus] = field(default=None, metadata={'description': 'The more detailed status of the L3 network.'})  # fmt: skip
    detailed_status_message: Optional[str] = field(default=None, metadata={'description': 'The descriptive message about the current detailed status.'})  # fmt: skip
    hybrid_aks_clusters_associated_ids: List[str] = field(factory=list, metadata={'description': 'Field Deprecated. These fields will be empty/omitted. The list of Hybrid AKS cluster resource IDs that are associated with this L3 network.', 'deprecated': True})  # fmt: skip
    hybrid_aks_ipam_enabled: Optional[HybridAksIpamEnabled] = field(default=None, metadata={'description': 'Field Deprecated. The field was previously optional, now it will have no defined behavior and will be ignored.', 'deprecated': True, 'default_value': HybridAksIpamEnabled.TRUE})  # fmt: skip
    hybrid_aks_plugin_type: Optional[HybridAksPluginType] = field(default=None, metadata={'description': 'Field Deprecated. The field was previously optional, now it will have no defined behavior and will be ignored.', 'deprecated': True, 'default_value': HybridAksPluginType.SRIOV})  # fmt: skip
    interface_name: Optional[str] = field(default=None, metadata={'description': 'The default interface name for this L3 network in the virtual machine.'})  # fmt: skip
    ip_allocation_type: Optional[IpAllocationType] = field(default=None, metadata={'description': 'The type of the IP address allocation, defaulted to DualStack .', 'default_value': IpAllocationType.DUAL_STACK})  # fmt: skip
    ipv4_connected_prefix: Optional[str] = field(default=None, metadata={'description': 'The IPV4 prefix (CIDR) assigned to this L3 network. Required when the IP allocation type is IPV4 or DualStack.'})  # fmt: skip
    ipv6_connected_prefix: Optional[str] = field(default=None, metadata={'description': 'The IPV6 prefix (CIDR) assigned to this L3 network. Required when the IP allocation type is IPV6 or DualStack.'})  # fmt: skip
    l3_isolation_domain_id: str = field(metadata={'description': 'The resource ID of the Network Fabric l3IsolationDomain.'})  # fmt: skip
    provisioning_state: Optional[L3NetworkProvisioningState] = field(default=None, metadata={'description': 'The provisioning state of the L3 network.'})  # fmt: skip
    virtual_machines_associated_ids: List[str] = field(factory=list, metadata={'description': 'Field Deprecated. These fields will be empty/omitted. The list of virtual machine resource IDs, excluding any Hybrid AKS virtual machines, that are currently using this L3 network.', 'deprecated': True})  # fmt: skip
    vlan: int = field(metadata={"description": "The VLAN from the l3IsolationDomain that is used for this network."})


@define(slots=False, kw_only=True)
class AzureNetworkCloudL3Network(AzureTrackedResource):
    kind: ClassVar[str] = "azure_network_cloud_l3_network"
    mapping: ClassVar[Dict[str, Bender]] = AzureTrackedResource.mapping | {
        "extended_location": S("extendedLocation") >> Bend(AzureExtendedLocation.mapping),
        "properties": S("properties") >> Bend(AzureL3NetworkProperties.mapping),
    }
    extended_location: AzureExtendedLocation = field(metadata={'description': 'The extended location of the cluster associated with the resource.'})  # fmt: skip
    properties: AzureL3NetworkProperties = field(metadata={"description": "The list of the resource properties."})


@define(slots=False, kw_only=True)
class AzureNetworkCloudL3NetworkList(AzurePagedList):
    kind: ClassVar[str] = "azure_network_cloud_l3_network_list"
    mapping: ClassVar[Dict[str, Bender]] = AzurePagedList.mapping | {
        "value": S("value") >> ForallBend(AzureNetworkCloudL3Network.mapping),
    }
    value: List[AzureNetworkCloudL3Network] = field(factory=list, metadata={"description": "The list of L3 networks."})


@define(slots=False, kw_only=True)
class AzureNetworkCloudL3NetworkPatchParameters(AzureModel):
    kind: ClassVar[str] = "azure_network_cloud_l3_network_patch_parameters"
    mapping: ClassVar[Dict[str, Bender]] = {"tags": S("tags")}
    tags: Dict[str, Any] = field(factory=dict, metadata={"description": "The Azure resource tags that will replace the existing ones."})  # fmt: skip


# endregion
