import attrs
import pytest

from conftest import roundtrip_check, load_json
from arm_models.resource.base import DeserializationError, wire_names
from arm_models.resource.networkcloud import (
    AgentPoolMode,
    HugepagesSize,
    HybridAksIpamEnabled,
    HybridAksPluginType,
    IpAllocationType,
    KubernetesPluginType,
    L3NetworkConfigurationIpamEnabled,
    OsDiskCreateOption,
    OsDiskDeleteOption,
    VirtualMachineBootMethod,
    VirtualMachineDeviceModelType,
    VirtualMachineIpAllocationMethod,
    VirtualMachineIsolateEmulatorThread,
    VirtualMachineVirtioInterfaceType,
    AzureAgentOptions,
    AzureKubernetesLabel,
    AzureL3NetworkAttachmentConfiguration,
    AzureL3NetworkProperties,
    AzureNetworkAttachment,
    AzureNetworkCloudAgentPool,
    AzureNetworkCloudAgentPoolList,
    AzureNetworkCloudAgentPoolPatchParameters,
    AzureNetworkCloudBareMetalMachine,
    AzureNetworkCloudBareMetalMachineList,
    AzureNetworkCloudBareMetalMachinePatchParameters,
    AzureNetworkCloudClusterList,
    AzureNetworkCloudKubernetesClusterList,
    AzureNetworkCloudL3NetworkList,
    AzureNetworkCloudVirtualMachineList,
    AzureOsDisk,
    AzureStorageProfile,
    AzureVirtualMachineProperties,
    service_name,
)
from armlib.json import from_json, to_json_element


def test_kubernetes_label() -> None:
    label = AzureKubernetesLabel.from_json({"name": "k1", "value": "v1"})
    assert label.key == "k1"
    assert label.value == "v1"
    assert label.to_json() == {"name": "k1", "value": "v1"}
    with pytest.raises(DeserializationError) as ex:
        AzureKubernetesLabel.from_json({"key": "k1", "value": "v1"})
    assert ex.value.path == "$.name"


def test_unknown_hugepages_size() -> None:
    options = AzureAgentOptions.from_json({"hugepagesCount": 2, "hugepagesSize": "4M"})
    assert options.hugepages_count == 2
    assert options.hugepages_size is not None and options.hugepages_size.is_unknown_value
    assert str(options.hugepages_size) == "4M"
    assert options.to_json() == {"hugepagesCount": 2, "hugepagesSize": "4M"}
    known = AzureAgentOptions.from_json({"hugepagesCount": 2, "hugepagesSize": "1G"})
    assert known.hugepages_size is HugepagesSize.SIZE_1G


def test_hugepages_size_snippet() -> None:
    snippet = {"hugepagesSize": "4M"}
    size = from_json(snippet["hugepagesSize"], HugepagesSize)
    assert size.is_unknown_value
    assert to_json_element(size) == "4M"
    # the agent options carry the size next to the required count
    with pytest.raises(DeserializationError) as ex:
        AzureAgentOptions.from_json(snippet)
    assert ex.value.path == "$.hugepagesCount"


def test_enum_defaults() -> None:
    options = AzureAgentOptions.from_json({"hugepagesCount": 4})
    assert options.hugepages_size is None
    assert options.value_or_default("hugepages_size") is HugepagesSize.SIZE_2M
    assert options.to_json() == {"hugepagesCount": 4}
    assert AzureAgentOptions(hugepages_count=4).to_json() == {"hugepagesCount": 4}
    # an explicit value is sent as received
    explicit = AzureAgentOptions.from_json({"hugepagesCount": 4, "hugepagesSize": "2M"})
    assert explicit.hugepages_size is HugepagesSize.SIZE_2M
    assert explicit.to_json() == {"hugepagesCount": 4, "hugepagesSize": "2M"}
    l3 = AzureL3NetworkAttachmentConfiguration.from_json({"networkId": "/l3"})
    assert l3.value_or_default("ipam_enabled") is L3NetworkConfigurationIpamEnabled.FALSE
    assert l3.value_or_default("plugin_type") is KubernetesPluginType.SRIOV
    assert l3.to_json() == {"networkId": "/l3"}
    disk = AzureOsDisk.from_json({"diskSizeGB": 120})
    assert disk.value_or_default("create_option") is OsDiskCreateOption.EPHEMERAL
    assert disk.value_or_default("delete_option") is OsDiskDeleteOption.DELETE
    assert disk.to_json() == {"diskSizeGB": 120}
    vm_js = {
        "adminUsername": "admin",
        "cloudServicesNetworkAttachment": {"attachedNetworkId": "/csn", "ipAllocationMethod": "Dynamic"},
        "cpuCores": 2,
        "memorySizeGB": 8,
        "storageProfile": {"osDisk": {"diskSizeGB": 120}},
        "vmImage": "myacr.azurecr.io/foobar:latest",
    }
    vm = AzureVirtualMachineProperties.from_json(vm_js)
    assert vm.value_or_default("boot_method") is VirtualMachineBootMethod.UEFI
    assert vm.value_or_default("vm_device_model") is VirtualMachineDeviceModelType.T2
    assert vm.network_attachments == []
    assert vm.to_json() == vm_js


def test_new_models_omit_absent_and_deprecated_fields() -> None:
    l3 = AzureL3NetworkProperties(l3_isolation_domain_id="/isolation/domain", vlan=12)
    assert l3.to_json() == {"l3IsolationDomainId": "/isolation/domain", "vlan": 12}
    assert l3.value_or_default("ip_allocation_type") is IpAllocationType.DUAL_STACK
    assert l3.value_or_default("hybrid_aks_ipam_enabled") is HybridAksIpamEnabled.TRUE
    assert l3.value_or_default("hybrid_aks_plugin_type") is HybridAksPluginType.SRIOV
    vm = AzureVirtualMachineProperties(
        admin_username="admin",
        cloud_services_network_attachment=AzureNetworkAttachment(
            attached_network_id="/csn", ip_allocation_method=VirtualMachineIpAllocationMethod.DYNAMIC
        ),
        cpu_cores=2,
        memory_size_gb=8,
        storage_profile=AzureStorageProfile(os_disk=AzureOsDisk(disk_size_gb=120)),
        vm_image="myacr.azurecr.io/foobar:latest",
    )
    js = vm.to_json()
    for deprecated in ("isolateEmulatorThread", "virtioInterface"):
        assert deprecated not in js
    assert vm.value_or_default("isolate_emulator_thread") is VirtualMachineIsolateEmulatorThread.TRUE
    assert vm.value_or_default("virtio_interface") is VirtualMachineVirtioInterfaceType.MODERN
    # every field flagged as deprecated is left out of a model that does not set it
    deprecated_fields = [a.name for a in attrs.fields(AzureL3NetworkProperties) if a.metadata.get("deprecated")]
    assert set(deprecated_fields) == {
        "hybrid_aks_clusters_associated_ids",
        "hybrid_aks_ipam_enabled",
        "hybrid_aks_plugin_type",
        "virtual_machines_associated_ids",
    }
    names = wire_names(AzureL3NetworkProperties)
    assert all(names[name] not in l3.to_json() for name in deprecated_fields)


def test_bare_metal_machines() -> None:
    machines = roundtrip_check(AzureNetworkCloudBareMetalMachineList, service_name, "bareMetalMachines", all_props=True)
    assert len(machines) == 2
    first, second = machines
    assert isinstance(first, AzureNetworkCloudBareMetalMachine)
    assert first.properties.rack_slot == 1
    assert first.properties.bmc_credentials.username == "bmcuser"
    assert first.properties.hardware_inventory is not None
    assert first.properties.hardware_inventory.interfaces[0].name == "nic1"
    assert first.system_data is not None and first.system_data.created_at is not None
    assert first.extended_location.type == "CustomLocation"
    assert isinstance(second, AzureNetworkCloudBareMetalMachine)
    assert second.properties.power_state is not None and second.properties.power_state.is_unknown_value
    assert second.tags == {}


def test_bare_metal_machine_list_continuation() -> None:
    page = AzureNetworkCloudBareMetalMachineList.from_json(load_json(service_name, "bareMetalMachines"))
    assert page.continuation() is not None
    assert page.continuation().endswith("$skipToken=page2")  # type: ignore


def test_bare_metal_machine_missing_rack_slot() -> None:
    js = load_json(service_name, "bareMetalMachines")["value"][0]
    del js["properties"]["rackSlot"]
    with pytest.raises(DeserializationError) as ex:
        AzureNetworkCloudBareMetalMachine.from_json(js)
    assert ex.value.path == "$.properties.rackSlot"
    page = load_json(service_name, "bareMetalMachines")
    page["value"][1]["properties"]["rackSlot"] = "2"
    with pytest.raises(DeserializationError) as ex:
        AzureNetworkCloudBareMetalMachineList.from_json(page)
    assert ex.value.path == "$.value[1].properties.rackSlot"


def test_clusters() -> None:
    clusters = roundtrip_check(AzureNetworkCloudClusterList, service_name, "clusters")
    assert len(clusters) == 1
    props = clusters[0].properties  # type: ignore
    assert props.cluster_version == "1.0.0"
    assert len(props.aggregator_or_single_rack_definition.bare_metal_machine_configuration_data) == 2
    assert props.compute_deployment_threshold.value == 90
    assert props.compute_rack_definitions == []


def test_virtual_machines() -> None:
    vms = roundtrip_check(AzureNetworkCloudVirtualMachineList, service_name, "virtualMachines")
    props = vms[0].properties  # type: ignore
    assert props.storage_profile.os_disk.disk_size_gb == 120
    assert props.placement_hints[0].scope == "Machine"
    assert props.cloud_services_network_attachment.ip_allocation_method == "Dynamic"


def test_kubernetes_clusters() -> None:
    clusters = roundtrip_check(AzureNetworkCloudKubernetesClusterList, service_name, "kubernetesClusters")
    props = clusters[0].properties  # type: ignore
    pool = props.initial_agent_pool_configurations[0]
    assert pool.agent_options.hugepages_size is HugepagesSize.SIZE_1G
    assert pool.labels[0].key == "kubernetes.label"
    assert pool.taints[0].value == "true"
    assert pool.attached_network_configuration.trunked_networks[0].plugin_type is KubernetesPluginType.MACVLAN
    assert props.aad_configuration.admin_group_object_ids == ["ffffffff-ffff-ffff-ffff-ffffffffffff"]
    assert props.nodes[0].labels[0].key == "kubernetes.label"


def test_agent_pools() -> None:
    pools = roundtrip_check(AzureNetworkCloudAgentPoolList, service_name, "agentPools")
    assert len(pools) == 2
    system, user = pools
    assert isinstance(system, AzureNetworkCloudAgentPool)
    assert system.properties.mode is AgentPoolMode.SYSTEM
    assert isinstance(user, AzureNetworkCloudAgentPool)
    assert user.extended_location is None
    assert user.properties.agent_options is None
    assert user.properties.mode is AgentPoolMode.USER


def test_agent_pool_list_without_next_page() -> None:
    page = AzureNetworkCloudAgentPoolList.from_json(load_json(service_name, "agentPools"))
    assert page.next_link == ""
    assert page.continuation() is None
    # the empty link is sent as received
    assert page.to_json()["nextLink"] == ""


def test_l3_networks() -> None:
    networks = roundtrip_check(AzureNetworkCloudL3NetworkList, service_name, "l3Networks")
    props = networks[0].properties  # type: ignore
    assert props.ip_allocation_type is IpAllocationType.DUAL_STACK
    assert props.vlan == 12
    assert props.hybrid_aks_clusters_associated_ids == []


def test_patch_parameters() -> None:
    patch = AzureNetworkCloudBareMetalMachinePatchParameters.from_json({"properties": {"machineDetails": "rack 3"}})
    assert patch.properties is not None
    assert patch.properties.machine_details == "rack 3"
    assert patch.tags == {}
    assert patch.to_json() == {"properties": {"machineDetails": "rack 3"}}
    tags_only = AzureNetworkCloudAgentPoolPatchParameters.from_json({"tags": {"key": "value"}})
    assert tags_only.properties is None
    assert tags_only.to_json() == {"tags": {"key": "value"}}
